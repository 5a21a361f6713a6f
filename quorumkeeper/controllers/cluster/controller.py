"""Cluster reconciler - one full pass over a managed cluster.

A pass reads the cluster status, runs failover or recovery, steps the
rolling upgrade when no failover is in progress and writes the status
back. Status is written even when a step fails so that partial progress
(a flipped deleted flag, a moved partition) is not repeated on retry.
"""

from __future__ import annotations

import logging

from quorumkeeper.clients.interfaces import StatusStore
from quorumkeeper.controllers.base.base_controller import (
    ControllerDependencies,
    PassResult,
    PassTimerMixin,
)
from quorumkeeper.controllers.cluster.status_updater import StatusUpdater
from quorumkeeper.controllers.failover.controller import FailoverController
from quorumkeeper.controllers.upgrade.upgrade_stepper import (
    UpgradeResult,
    UpgradeStepper,
)
from quorumkeeper.errors import QuorumKeeperError, is_requeue_error
from quorumkeeper.models.core.member_info import ClusterInfo
from quorumkeeper.models.core.workload_info import ComputeGroupInfo

logger = logging.getLogger(__name__)


class ClusterReconciler(PassTimerMixin):
    """Runs reconciliation passes for one cluster at a time."""

    def __init__(self, deps: ControllerDependencies, store: StatusStore) -> None:
        super().__init__()
        self.deps = deps
        self.store = store
        self.failover = FailoverController(deps)
        self.stepper = UpgradeStepper(deps)
        self.status_updater = StatusUpdater(store, deps.settings)

    async def _step_upgrade(
        self,
        cluster: ClusterInfo,
        old_group: ComputeGroupInfo | None,
        new_group: ComputeGroupInfo | None,
    ) -> UpgradeResult | None:
        if old_group is None or new_group is None:
            return None
        if cluster.status.failure_members:
            logger.info(
                "Cluster %s/%s: failover in progress, upgrade waits",
                cluster.namespace,
                cluster.name,
            )
            return None
        return await self.stepper.upgrade(cluster, old_group, new_group)

    async def reconcile(
        self,
        cluster: ClusterInfo,
        old_group: ComputeGroupInfo | None = None,
        new_group: ComputeGroupInfo | None = None,
    ) -> PassResult:
        """Run one pass.

        Step failures come back as an unsuccessful PassResult; failures to read
        or write the status record propagate.
        """
        self._start_pass()
        ns, name = cluster.namespace, cluster.name
        cluster.status = await self.store.get(ns, name)

        error: QuorumKeeperError | None = None
        upgrade: UpgradeResult | None = None
        try:
            await self.failover.sync(cluster)
            upgrade = await self._step_upgrade(cluster, old_group, new_group)
        except QuorumKeeperError as exc:
            error = exc
            logger.warning("Cluster %s/%s: pass stopped: %s", ns, name, exc)

        cluster.status = await self.status_updater.update(ns, name, cluster.status)

        if error is not None:
            return PassResult(
                success=False,
                requeue=is_requeue_error(error),
                error=str(error),
                duration_ms=self._elapsed_ms(),
            )
        return PassResult(success=True, data=upgrade, duration_ms=self._elapsed_ms())
