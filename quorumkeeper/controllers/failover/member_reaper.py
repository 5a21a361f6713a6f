"""Member reaper - ordered teardown of a failed member.

Teardown order is membership, then pod, then storage claims. The member is
deregistered first so the database never sees storage disappear for a
member it still counts. Every step tolerates having already run, so a pass
that stops at a failing step can simply be retried.
"""

from __future__ import annotations

import logging
import re

from quorumkeeper.constants.enums import EventReason, EventType
from quorumkeeper.constants.limits import MEMBER_ID_MAX
from quorumkeeper.controllers.base.base_controller import ControllerDependencies
from quorumkeeper.errors import InvalidMemberIDError, NotFoundError
from quorumkeeper.models.core.member_info import ClusterInfo, FailureMemberInfo
from quorumkeeper.models.core.workload_info import PodInfo, StorageClaimInfo

logger = logging.getLogger(__name__)

_MEMBER_ID_PATTERN = re.compile(r"[0-9]+")


def parse_member_id(pod_name: str, member_id: str) -> int:
    """Parse a stored member id, refusing anything but an unsigned 64-bit integer."""
    if not _MEMBER_ID_PATTERN.fullmatch(member_id or ""):
        raise InvalidMemberIDError(pod_name, member_id, "invalid syntax")
    value = int(member_id)
    if value > MEMBER_ID_MAX:
        raise InvalidMemberIDError(pod_name, member_id, "value out of range")
    return value


class MemberReaper:
    """Tears down failure members that are not deleted yet."""

    def __init__(self, deps: ControllerDependencies) -> None:
        self.deps = deps

    async def _find_pod(self, namespace: str, pod_name: str) -> PodInfo | None:
        try:
            return await self.deps.pods.get(namespace, pod_name)
        except NotFoundError:
            logger.debug("Pod %s/%s already removed", namespace, pod_name)
            return None

    async def _member_claims(
        self, namespace: str, pod_name: str, pod: PodInfo | None
    ) -> list[StorageClaimInfo]:
        """Claims mounted by the pod, or labelled with its name once it is gone."""
        if pod is None:
            return await self.deps.claims.list_for_pod(namespace, pod_name)

        claims: list[StorageClaimInfo] = []
        for claim_name in pod.claim_names:
            try:
                claims.append(await self.deps.claims.get(namespace, claim_name))
            except NotFoundError:
                continue
        return claims

    async def reap(self, cluster: ClusterInfo, failure: FailureMemberInfo) -> None:
        """Tear down one failure member and flip its deleted flag.

        Raises on the first failing step, leaving ``member_deleted`` False.
        """
        if failure.member_deleted:
            return

        namespace = cluster.namespace
        pod_name = failure.pod_name
        member_id = parse_member_id(pod_name, failure.member_id)

        await self.deps.membership.delete_member_by_id(member_id)
        logger.info(
            "Cluster %s/%s: deregistered failure member %s(%d)",
            namespace,
            cluster.name,
            pod_name,
            member_id,
        )
        self.deps.events.record(
            cluster.name,
            EventType.NORMAL,
            EventReason.MEMBER_DELETED,
            f"failure member {namespace}/{pod_name}({failure.member_id}) deleted from cluster",
        )

        pod = await self._find_pod(namespace, pod_name)
        if pod is not None and pod.deletion_timestamp is None:
            await self.deps.pods.delete(namespace, pod_name)
            logger.info("Cluster %s/%s: deleted pod %s", namespace, cluster.name, pod_name)

        for claim in await self._member_claims(namespace, pod_name, pod):
            if failure.claim_uids and claim.uid not in failure.claim_uids:
                logger.debug(
                    "Claim %s/%s (uid %s) was not recorded for %s, keeping it",
                    namespace,
                    claim.name,
                    claim.uid,
                    pod_name,
                )
                continue
            if claim.deletion_timestamp is not None:
                continue
            await self.deps.claims.delete(namespace, claim.name)
            logger.info(
                "Cluster %s/%s: deleted claim %s of pod %s",
                namespace,
                cluster.name,
                claim.name,
                pod_name,
            )

        failure.member_deleted = True

    async def reap_all(self, cluster: ClusterInfo) -> list[str]:
        """Reap every pending failure member in name order.

        Stops at the first error. Returns the pod names reaped in this pass.
        """
        reaped: list[str] = []
        failures = cluster.status.failure_members
        for pod_name in sorted(failures):
            failure = failures[pod_name]
            if failure.member_deleted:
                continue
            await self.reap(cluster, failure)
            reaped.append(pod_name)
        return reaped
