"""Base controller with the dependency wiring shared by every pass.

This module provides the foundation for reconciliation controllers: the
collaborator bundle they are built from and the result wrapper a pass
returns to the work queue.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from quorumkeeper.clients.interfaces import (
    ClaimDirectory,
    EventSink,
    MembershipClient,
    PodDirectory,
)
from quorumkeeper.clients.memory import utcnow
from quorumkeeper.models.core.member_info import ClusterInfo
from quorumkeeper.models.state.failover_settings import FailoverSettings
from quorumkeeper.utils.events import LoggingEventSink

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


@dataclass
class PassResult:
    """Result wrapper for one reconciliation pass."""

    success: bool
    requeue: bool = False
    error: str | None = None
    data: Any | None = None
    duration_ms: float = 0.0


@dataclass
class ControllerDependencies:
    """Collaborators and configuration handed to every controller."""

    pods: PodDirectory
    claims: ClaimDirectory
    membership: MembershipClient
    events: EventSink = field(default_factory=LoggingEventSink)
    settings: FailoverSettings = field(default_factory=FailoverSettings)
    clock: Callable[[], datetime] = utcnow


class PassTimerMixin:
    """Mixin tracking how long the current pass has been running."""

    def __init__(self) -> None:
        """Initialize the pass timer."""
        self._pass_start_time: float | None = None

    def _start_pass(self) -> None:
        self._pass_start_time = time.monotonic()

    def _elapsed_ms(self) -> float:
        if self._pass_start_time is None:
            return 0.0
        return (time.monotonic() - self._pass_start_time) * 1000


class BaseController(PassTimerMixin, ABC, Generic[ResultT]):
    """Base controller class.

    Subclasses implement ``sync`` to drive one cluster one step closer to
    its desired state.
    """

    def __init__(self, deps: ControllerDependencies) -> None:
        super().__init__()
        self.deps = deps

    @abstractmethod
    async def sync(self, cluster: ClusterInfo) -> ResultT:
        """Run one pass against ``cluster``, mutating its status in place.

        Returns the controller-specific summary of the pass.
        """
        ...
