"""Recovery reconciler - ends a failover episode."""

from __future__ import annotations

import logging

from quorumkeeper.models.core.member_info import ClusterInfo

logger = logging.getLogger(__name__)


class RecoveryReconciler:
    """Clears failure bookkeeping once the episode is over.

    The desired replica count is trusted verbatim; cleared entries are not
    correlated with it. The next pass re-detects any genuine unhealthiness.
    """

    def recover(self, cluster: ClusterInfo) -> int:
        """Clear every failure member; return how many were cleared."""
        failures = cluster.status.failure_members
        if not failures:
            return 0
        cleared = len(failures)
        logger.info(
            "Cluster %s/%s: clearing %d failure members, desired replicas %d",
            cluster.namespace,
            cluster.name,
            cleared,
            cluster.replicas,
        )
        failures.clear()
        return cleared
