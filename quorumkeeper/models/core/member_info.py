"""Cluster membership and status models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from quorumkeeper.constants.enums import ClusterPhase, StoreState
from quorumkeeper.constants.values import MEMBER_COMPONENT


class MemberInfo(BaseModel):
    """One voting member as reported by the cluster's status sync."""

    name: str
    id: str
    health: bool = True
    last_transition_time: datetime | None = None


class FailureMemberInfo(BaseModel):
    """Bookkeeping for a member being removed after prolonged unhealthiness."""

    pod_name: str
    member_id: str
    claim_uids: set[str] = Field(default_factory=set)
    member_deleted: bool = False
    created_at: datetime | None = None


class StoreInfo(BaseModel):
    """Store record for one member pod."""

    pod_name: str
    id: str = ""
    state: StoreState = StoreState.UNKNOWN


class ClusterStatus(BaseModel):
    """Status record of one managed cluster component."""

    synced: bool = False
    phase: ClusterPhase = ClusterPhase.NORMAL
    members: dict[str, MemberInfo] = Field(default_factory=dict)
    peer_members: dict[str, MemberInfo] = Field(default_factory=dict)
    failure_members: dict[str, FailureMemberInfo] = Field(default_factory=dict)
    stores: dict[str, StoreInfo] = Field(default_factory=dict)
    current_revision: str = ""
    update_revision: str = ""
    resource_version: int = 0

    def store_for_pod(self, pod_name: str) -> StoreInfo | None:
        """Return the store record backing ``pod_name``, if any."""
        store = self.stores.get(pod_name)
        if store is not None:
            return store
        for candidate in self.stores.values():
            if candidate.pod_name == pod_name:
                return candidate
        return None


class ClusterInfo(BaseModel):
    """A managed cluster: desired state plus its status record."""

    name: str
    namespace: str = "default"
    replicas: int = 3
    max_failover_count: int | None = None
    version: str = ""
    upstream_phase: ClusterPhase = ClusterPhase.NORMAL
    status: ClusterStatus = Field(default_factory=ClusterStatus)

    def is_scaling(self) -> bool:
        """Return True when the component is in the middle of scaling."""
        return self.status.phase == ClusterPhase.SCALING

    def member_name(self) -> str:
        """Return the compute group name for the member component."""
        return f"{self.name}-{MEMBER_COMPONENT}"

    def pod_name(self, ordinal: int) -> str:
        """Return the pod name serving ``ordinal``."""
        return f"{self.member_name()}-{ordinal}"
