"""Status updater - optimistic-concurrency writes of cluster status."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from quorumkeeper.clients.interfaces import StatusStore
from quorumkeeper.errors import ConflictError
from quorumkeeper.models.core.member_info import ClusterStatus
from quorumkeeper.models.state.failover_settings import FailoverSettings

logger = logging.getLogger(__name__)


def reapply_owned_fields(latest: ClusterStatus, ours: ClusterStatus) -> ClusterStatus:
    """Copy the fields this core owns onto a freshly read status.

    Members, peer members and stores belong to the external status sync and
    are taken from ``latest``.
    """
    merged = latest.model_copy(deep=True)
    merged.phase = ours.phase
    merged.failure_members = {
        name: failure.model_copy(deep=True)
        for name, failure in ours.failure_members.items()
    }
    return merged


class StatusUpdater:
    """Writes status with a bounded read-modify-write retry loop."""

    def __init__(
        self,
        store: StatusStore,
        settings: FailoverSettings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._store = store
        self._settings = settings or FailoverSettings()
        self._sleep = sleep

    async def update(
        self, namespace: str, name: str, status: ClusterStatus
    ) -> ClusterStatus:
        """Persist ``status``, re-reading and re-applying on conflicts."""
        attempts = self._settings.status_update_attempts
        delay = self._settings.status_update_backoff_seconds
        candidate = status
        for attempt in range(1, attempts + 1):
            try:
                return await self._store.update(namespace, name, candidate)
            except ConflictError as exc:
                if attempt >= attempts:
                    raise
                logger.warning(
                    "Status update of %s/%s conflicted (attempt %s/%s), retrying: %s",
                    namespace,
                    name,
                    attempt,
                    attempts,
                    exc,
                )
            await self._sleep(delay)
            delay *= self._settings.status_update_backoff_factor
            latest = await self._store.get(namespace, name)
            candidate = reapply_owned_fields(latest, status)
        raise ConflictError(f"status update of {namespace}/{name} kept conflicting")
