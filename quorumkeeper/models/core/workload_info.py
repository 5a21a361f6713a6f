"""Kubernetes workload models: pods, storage claims and compute groups."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from quorumkeeper.constants.enums import UpdateStrategyType
from quorumkeeper.constants.values import CONTROLLER_REVISION_LABEL


class PodInfo(BaseModel):
    """Pod backing one member."""

    name: str
    namespace: str = "default"
    uid: str = ""
    ready: bool = False
    labels: dict[str, str] = Field(default_factory=dict)
    claim_names: list[str] = Field(default_factory=list)
    deletion_timestamp: datetime | None = None

    @property
    def revision(self) -> str | None:
        """Controller revision the pod was created from."""
        return self.labels.get(CONTROLLER_REVISION_LABEL)


class StorageClaimInfo(BaseModel):
    """Persistent volume claim mounted by a member pod."""

    name: str
    namespace: str = "default"
    uid: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    deletion_timestamp: datetime | None = None


class UpdateStrategyInfo(BaseModel):
    """Update strategy of a compute group.

    ``rolling_update`` is False when the rolling-update block was removed
    from the live object, which disables partition control.
    """

    type: UpdateStrategyType = UpdateStrategyType.ROLLING_UPDATE
    rolling_update: bool = True
    partition: int | None = None


class ComputeGroupInfo(BaseModel):
    """Ordinal-indexed group of member pods (a StatefulSet)."""

    name: str
    replicas: int = 0
    delete_slots: set[int] = Field(default_factory=set)
    template: dict[str, Any] = Field(default_factory=dict)
    last_applied_template: dict[str, Any] | None = None
    update_strategy: UpdateStrategyInfo = Field(default_factory=UpdateStrategyInfo)

    def pod_ordinals(self) -> list[int]:
        """Return the ordinals currently served by the group, ascending.

        Ordinals listed in ``delete_slots`` are skipped and the group keeps
        ``replicas`` ordinals by extending past them.
        """
        ordinals: list[int] = []
        candidate = 0
        while len(ordinals) < self.replicas:
            if candidate not in self.delete_slots:
                ordinals.append(candidate)
            candidate += 1
        return ordinals
