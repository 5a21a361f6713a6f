"""Cluster domain: full reconciliation passes and status persistence."""

from quorumkeeper.controllers.cluster.controller import ClusterReconciler
from quorumkeeper.controllers.cluster.status_updater import (
    StatusUpdater,
    reapply_owned_fields,
)

__all__ = ["ClusterReconciler", "StatusUpdater", "reapply_owned_fields"]
