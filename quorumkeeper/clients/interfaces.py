"""Contracts for the collaborators the decision core talks to.

Reads may be served from a cache and be slightly stale. Deletes are
idempotent against objects that are already gone.
"""

from __future__ import annotations

from typing import Protocol

from quorumkeeper.constants.enums import EventReason, EventType, LiveStatus
from quorumkeeper.models.core.member_info import ClusterStatus
from quorumkeeper.models.core.workload_info import PodInfo, StorageClaimInfo


class StatusStore(Protocol):
    """Per-cluster status records with optimistic concurrency."""

    async def get(self, namespace: str, name: str) -> ClusterStatus: ...

    async def update(
        self, namespace: str, name: str, status: ClusterStatus
    ) -> ClusterStatus:
        """Write ``status``; raise ConflictError when its resource_version is stale."""
        ...


class PodDirectory(Protocol):
    async def get(self, namespace: str, name: str) -> PodInfo:
        """Return the pod or raise NotFoundError."""
        ...

    async def delete(self, namespace: str, name: str) -> None: ...


class ClaimDirectory(Protocol):
    async def get(self, namespace: str, name: str) -> StorageClaimInfo:
        """Return the claim or raise NotFoundError."""
        ...

    async def delete(self, namespace: str, name: str) -> None: ...

    async def list_for_pod(
        self, namespace: str, pod_name: str
    ) -> list[StorageClaimInfo]:
        """Return claims labelled as belonging to ``pod_name``."""
        ...


class MembershipClient(Protocol):
    async def delete_member_by_id(self, member_id: int) -> None:
        """Deregister a member; absent ids are not an error."""
        ...

    async def get_live_status(
        self, namespace: str, cluster: str, pod_name: str
    ) -> LiveStatus: ...


class EventSink(Protocol):
    def record(
        self,
        cluster: str,
        event_type: EventType,
        reason: EventReason,
        message: str,
    ) -> None: ...
