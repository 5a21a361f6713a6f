"""In-memory collaborator implementations.

These back the unit tests and serve as reference adapters. Failures can be
injected per operation with ``fail_next``.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime, timezone

from quorumkeeper.constants.enums import LiveStatus
from quorumkeeper.constants.values import POD_NAME_LABEL
from quorumkeeper.errors import ClientError, ConflictError, NotFoundError
from quorumkeeper.models.core.member_info import ClusterStatus
from quorumkeeper.models.core.workload_info import PodInfo, StorageClaimInfo

logger = logging.getLogger(__name__)


class _FailureInjector:
    """Queues errors to raise from the next calls of an operation."""

    def __init__(self) -> None:
        self._pending: dict[str, list[Exception]] = defaultdict(list)
        self.calls: dict[str, int] = defaultdict(int)

    def fail_next(self, operation: str, error: Exception | None = None) -> None:
        """Make the next ``operation`` call raise ``error``."""
        self._pending[operation].append(
            error or ClientError(f"{operation}: API server failed")
        )

    def _enter(self, operation: str) -> None:
        self.calls[operation] += 1
        pending = self._pending.get(operation)
        if pending:
            raise pending.pop(0)


class InMemoryStatusStore(_FailureInjector):
    """Status store keyed by (namespace, name) with a resource version."""

    def __init__(self) -> None:
        super().__init__()
        self._records: dict[tuple[str, str], ClusterStatus] = {}

    def put(self, namespace: str, name: str, status: ClusterStatus) -> None:
        """Seed a record, as an external writer would."""
        current = self._records.get((namespace, name))
        stored = status.model_copy(deep=True)
        stored.resource_version = (current.resource_version + 1) if current else 1
        self._records[(namespace, name)] = stored

    async def get(self, namespace: str, name: str) -> ClusterStatus:
        self._enter("get")
        record = self._records.get((namespace, name))
        if record is None:
            raise NotFoundError("ClusterStatus", namespace, name)
        return record.model_copy(deep=True)

    async def update(
        self, namespace: str, name: str, status: ClusterStatus
    ) -> ClusterStatus:
        self._enter("update")
        current = self._records.get((namespace, name))
        if current is None:
            raise NotFoundError("ClusterStatus", namespace, name)
        if status.resource_version != current.resource_version:
            raise ConflictError(
                f"status {namespace}/{name}: resource version "
                f"{status.resource_version} is stale (current {current.resource_version})"
            )
        stored = status.model_copy(deep=True)
        stored.resource_version = current.resource_version + 1
        self._records[(namespace, name)] = stored
        return stored.model_copy(deep=True)


class InMemoryPodDirectory(_FailureInjector):
    """Pod directory keyed by (namespace, name)."""

    def __init__(self, pods: list[PodInfo] | None = None) -> None:
        super().__init__()
        self._pods: dict[tuple[str, str], PodInfo] = {}
        self.deleted: list[str] = []
        for pod in pods or []:
            self.add(pod)

    def add(self, pod: PodInfo) -> None:
        self._pods[(pod.namespace, pod.name)] = pod

    def exists(self, namespace: str, name: str) -> bool:
        return (namespace, name) in self._pods

    async def get(self, namespace: str, name: str) -> PodInfo:
        self._enter("get")
        pod = self._pods.get((namespace, name))
        if pod is None:
            raise NotFoundError("Pod", namespace, name)
        return pod.model_copy(deep=True)

    async def delete(self, namespace: str, name: str) -> None:
        self._enter("delete")
        if self._pods.pop((namespace, name), None) is not None:
            self.deleted.append(name)
            logger.debug("Deleted pod %s/%s", namespace, name)


class InMemoryClaimDirectory(_FailureInjector):
    """Storage-claim directory keyed by (namespace, name)."""

    def __init__(self, claims: list[StorageClaimInfo] | None = None) -> None:
        super().__init__()
        self._claims: dict[tuple[str, str], StorageClaimInfo] = {}
        self.deleted: list[str] = []
        for claim in claims or []:
            self.add(claim)

    def add(self, claim: StorageClaimInfo) -> None:
        self._claims[(claim.namespace, claim.name)] = claim

    def exists(self, namespace: str, name: str) -> bool:
        return (namespace, name) in self._claims

    async def get(self, namespace: str, name: str) -> StorageClaimInfo:
        self._enter("get")
        claim = self._claims.get((namespace, name))
        if claim is None:
            raise NotFoundError("PersistentVolumeClaim", namespace, name)
        return claim.model_copy(deep=True)

    async def delete(self, namespace: str, name: str) -> None:
        self._enter("delete")
        if self._claims.pop((namespace, name), None) is not None:
            self.deleted.append(name)
            logger.debug("Deleted claim %s/%s", namespace, name)

    async def list_for_pod(
        self, namespace: str, pod_name: str
    ) -> list[StorageClaimInfo]:
        self._enter("list_for_pod")
        return [
            claim.model_copy(deep=True)
            for (claim_namespace, _), claim in sorted(self._claims.items())
            if claim_namespace == namespace
            and claim.labels.get(POD_NAME_LABEL) == pod_name
        ]


class InMemoryMembershipClient(_FailureInjector):
    """Membership registry of numeric member ids with per-pod live status."""

    def __init__(self, member_ids: set[int] | None = None) -> None:
        super().__init__()
        self.member_ids: set[int] = set(member_ids or ())
        self.deleted_ids: list[int] = []
        self.live_status: dict[str, LiveStatus] = {}

    async def delete_member_by_id(self, member_id: int) -> None:
        self._enter("delete_member_by_id")
        self.member_ids.discard(member_id)
        self.deleted_ids.append(member_id)

    async def get_live_status(
        self, namespace: str, cluster: str, pod_name: str
    ) -> LiveStatus:
        self._enter("get_live_status")
        return self.live_status.get(pod_name, LiveStatus.RUNNING)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
