"""Upgrade stepper - computes how far a rolling upgrade may advance.

The native rolling mechanism replaces pods whose ordinal is at or above the
partition. The stepper walks ordinals from the highest down and only lowers
the partition past a pod once that pod runs the target revision and is
healthy, so the lowest ordinal (usually the seed member) is upgraded last.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from quorumkeeper.constants.enums import (
    ClusterPhase,
    EventReason,
    EventType,
    LiveStatus,
    StoreState,
    UpdateStrategyType,
    UpgradeAction,
)
from quorumkeeper.constants.values import CONTROLLER_REVISION_LABEL
from quorumkeeper.controllers.base.base_controller import ControllerDependencies
from quorumkeeper.controllers.upgrade.version_gate import needs_live_status_check
from quorumkeeper.errors import (
    ClientError,
    QuorumKeeperError,
    RequeueError,
    StatusNotSyncedError,
)
from quorumkeeper.models.core.member_info import ClusterInfo, StoreInfo
from quorumkeeper.models.core.workload_info import ComputeGroupInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpgradeResult:
    """Decision of one upgrade step and the partition it left behind."""

    action: UpgradeAction
    partition: int | None = None


def descending_ordinals(group: ComputeGroupInfo) -> Iterator[int]:
    """Yield the group's ordinals from highest to lowest."""
    yield from reversed(group.pod_ordinals())


def set_upgrade_partition(group: ComputeGroupInfo, ordinal: int) -> None:
    group.update_strategy.partition = ordinal
    logger.debug("Set upgrade partition of %s to %d", group.name, ordinal)


def template_applied(old_group: ComputeGroupInfo, new_group: ComputeGroupInfo) -> bool:
    """True when the desired template is the one last applied to the live group."""
    return (
        old_group.last_applied_template is not None
        and old_group.last_applied_template == new_group.template
    )


class UpgradeStepper:
    """Moves the upgrade partition of the member compute group."""

    def __init__(self, deps: ControllerDependencies) -> None:
        self.deps = deps

    def _hold_template(
        self, cluster: ClusterInfo, old_group: ComputeGroupInfo, new_group: ComputeGroupInfo
    ) -> None:
        """Keep the live template so nothing rolls while the upgrade is held."""
        if old_group.last_applied_template is None:
            raise QuorumKeeperError(
                f"cluster [{cluster.namespace}/{cluster.name}]'s compute group "
                f"{old_group.name} has no last applied template"
            )
        new_group.template = copy.deepcopy(old_group.last_applied_template)

    async def _check_upgraded_member(
        self, cluster: ClusterInfo, pod_name: str, ready: bool, store: StoreInfo
    ) -> None:
        """Raise RequeueError unless an upgraded member is fully serving."""
        ns, name = cluster.namespace, cluster.name
        if not ready:
            raise RequeueError(
                f"cluster [{ns}/{name}]'s upgraded pod [{pod_name}] is not ready"
            )
        if store.state != StoreState.UP:
            raise RequeueError(
                f"cluster [{ns}/{name}]'s upgraded pod [{pod_name}], "
                f"store state is {store.state.value} instead of Up"
            )

        settings = self.deps.settings
        if not needs_live_status_check(
            cluster.version, settings.floating_tags, settings.live_status_min_version
        ):
            return
        try:
            live = await self.deps.membership.get_live_status(ns, name, pod_name)
        except ClientError as exc:
            raise RequeueError(
                f"cluster [{ns}/{name}]'s upgraded pod [{pod_name}], "
                f"get live status failed: {exc}"
            ) from exc
        if live != LiveStatus.RUNNING:
            raise RequeueError(
                f"cluster [{ns}/{name}]'s upgraded pod [{pod_name}], "
                f"live status is {live.value} instead of Running"
            )

    async def upgrade(
        self,
        cluster: ClusterInfo,
        old_group: ComputeGroupInfo,
        new_group: ComputeGroupInfo,
    ) -> UpgradeResult:
        """Run one upgrade step, writing the decision into ``new_group``."""
        ns, name = cluster.namespace, cluster.name
        status = cluster.status

        if cluster.upstream_phase == ClusterPhase.UPGRADING or cluster.is_scaling():
            logger.info(
                "Cluster [%s/%s]: upstream phase is %s, phase is %s, can not upgrade",
                ns,
                name,
                cluster.upstream_phase.value,
                status.phase.value,
            )
            self._hold_template(cluster, old_group, new_group)
            return UpgradeResult(UpgradeAction.HELD, new_group.update_strategy.partition)

        if not status.synced:
            raise StatusNotSyncedError(ns, name)

        status.phase = ClusterPhase.UPGRADING
        if not template_applied(old_group, new_group):
            logger.debug("Cluster [%s/%s]: new template not applied yet", ns, name)
            return UpgradeResult(
                UpgradeAction.TEMPLATE_PENDING, new_group.update_strategy.partition
            )

        if status.update_revision == status.current_revision:
            status.phase = ClusterPhase.NORMAL
            return UpgradeResult(UpgradeAction.UP_TO_DATE, new_group.update_strategy.partition)

        live_strategy = old_group.update_strategy
        if live_strategy.type == UpdateStrategyType.ON_DELETE or not live_strategy.rolling_update:
            new_group.update_strategy = live_strategy.model_copy(deep=True)
            logger.warning(
                "Cluster [%s/%s]: compute group %s update strategy has been modified manually",
                ns,
                name,
                old_group.name,
            )
            self.deps.events.record(
                name,
                EventType.WARNING,
                EventReason.MANUAL_BYPASS,
                f"compute group {old_group.name} update strategy has been modified "
                f"manually, native rolling update takes over",
            )
            return UpgradeResult(UpgradeAction.MANUAL_BYPASS, live_strategy.partition)

        live_partition = live_strategy.partition or 0
        set_upgrade_partition(new_group, live_partition)
        partition = live_partition
        missing_record = False
        for ordinal in descending_ordinals(old_group):
            pod_name = cluster.pod_name(ordinal)
            store = status.store_for_pod(pod_name)
            if store is None:
                logger.debug("Cluster [%s/%s]: %s has no store record yet", ns, name, pod_name)
                partition = ordinal
                missing_record = True
                continue

            try:
                pod = await self.deps.pods.get(ns, pod_name)
            except ClientError as exc:
                raise RequeueError(
                    f"cluster [{ns}/{name}]: failed to get pod {pod_name}: {exc}"
                ) from exc
            revision = pod.revision
            if revision is None:
                raise RequeueError(
                    f"cluster [{ns}/{name}]'s pod [{pod_name}] has no label "
                    f"{CONTROLLER_REVISION_LABEL}"
                )

            if revision == status.update_revision:
                await self._check_upgraded_member(cluster, pod_name, pod.ready, store)
                continue

            set_upgrade_partition(new_group, ordinal)
            logger.info(
                "Cluster [%s/%s]: upgrade partition moved to %d", ns, name, ordinal
            )
            return UpgradeResult(UpgradeAction.STEPPED, ordinal)

        if not missing_record:
            set_upgrade_partition(new_group, 0)
            return UpgradeResult(UpgradeAction.COMPLETE, 0)
        set_upgrade_partition(new_group, partition)
        return UpgradeResult(UpgradeAction.STEPPED, partition)
