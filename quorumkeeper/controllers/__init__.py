"""Controllers module for quorumkeeper.

This module provides domain-driven controllers for failure detection,
safe member removal and quorum-aware rolling upgrades.
"""

from __future__ import annotations

# Base classes
from quorumkeeper.controllers.base import (
    BaseController,
    ControllerDependencies,
    PassResult,
)

# Cluster domain
from quorumkeeper.controllers.cluster import ClusterReconciler, StatusUpdater

# Failover domain
from quorumkeeper.controllers.failover import (
    FailoverController,
    FailureTracker,
    MemberReaper,
    QuorumGuard,
    RecoveryReconciler,
)

# Upgrade domain
from quorumkeeper.controllers.upgrade import UpgradeResult, UpgradeStepper

__all__ = [
    # Base
    "BaseController",
    # Domain controllers
    "ClusterReconciler",
    "ControllerDependencies",
    "FailoverController",
    "FailureTracker",
    "MemberReaper",
    "PassResult",
    "QuorumGuard",
    "RecoveryReconciler",
    "StatusUpdater",
    "UpgradeResult",
    "UpgradeStepper",
]
