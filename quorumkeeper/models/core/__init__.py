"""Core domain models."""

from quorumkeeper.models.core.member_info import (
    ClusterInfo,
    ClusterStatus,
    FailureMemberInfo,
    MemberInfo,
    StoreInfo,
)
from quorumkeeper.models.core.workload_info import (
    ComputeGroupInfo,
    PodInfo,
    StorageClaimInfo,
    UpdateStrategyInfo,
)

__all__ = [
    "ClusterInfo",
    "ClusterStatus",
    "ComputeGroupInfo",
    "FailureMemberInfo",
    "MemberInfo",
    "PodInfo",
    "StorageClaimInfo",
    "StoreInfo",
    "UpdateStrategyInfo",
]
