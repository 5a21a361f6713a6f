"""Failover controller - wires health, quorum, tracking, reaping and recovery."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from quorumkeeper.controllers.base.base_controller import (
    BaseController,
    ControllerDependencies,
)
from quorumkeeper.controllers.failover.failure_tracker import (
    FailureTracker,
    TrackResult,
    member_states,
)
from quorumkeeper.controllers.failover.member_reaper import MemberReaper
from quorumkeeper.controllers.failover.recovery import RecoveryReconciler
from quorumkeeper.errors import StatusNotSyncedError
from quorumkeeper.models.core.member_info import ClusterInfo

logger = logging.getLogger(__name__)


@dataclass
class FailoverResult:
    """Summary of one failover pass."""

    track: TrackResult = field(default_factory=TrackResult)
    reaped: list[str] = field(default_factory=list)
    recovered: int = 0


class FailoverController(BaseController[FailoverResult]):
    """Runs failover while members are unhealthy, recovery once they are not."""

    def __init__(self, deps: ControllerDependencies) -> None:
        super().__init__(deps)
        self.tracker = FailureTracker(deps)
        self.reaper = MemberReaper(deps)
        self.recovery = RecoveryReconciler()

    def needs_failover(self, cluster: ClusterInfo) -> bool:
        """True while any member is UNHEALTHY, FAILED or still reported unhealthy."""
        states = member_states(cluster, self.deps.clock())
        return any(state.blocks_recovery for state in states.values())

    async def failover(self, cluster: ClusterInfo) -> FailoverResult:
        """Mark members that stayed unhealthy too long and tear down failed ones."""
        if not cluster.status.synced:
            raise StatusNotSyncedError(cluster.namespace, cluster.name)

        now = self.deps.clock()
        result = FailoverResult(track=await self.tracker.track(cluster, now))
        result.reaped = await self.reaper.reap_all(cluster)
        return result

    def recover(self, cluster: ClusterInfo) -> int:
        return self.recovery.recover(cluster)

    async def sync(self, cluster: ClusterInfo) -> FailoverResult:
        """Run whichever of failover or recovery the cluster needs."""
        if self.needs_failover(cluster):
            return await self.failover(cluster)
        if cluster.status.failure_members:
            return FailoverResult(recovered=self.recover(cluster))
        logger.debug(
            "Cluster %s/%s: %d members healthy, nothing to fail over",
            cluster.namespace,
            cluster.name,
            len(cluster.status.members),
        )
        return FailoverResult()
