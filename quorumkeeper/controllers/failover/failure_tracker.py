"""Failure tracker - per-member failover state machine.

Each member moves through HEALTHY -> UNHEALTHY -> FAILED -> DELETED. The
FAILED and DELETED states are persisted as ``FailureMemberInfo`` records in
the cluster status; HEALTHY and UNHEALTHY are derived from the observed
health on every pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from quorumkeeper.constants.enums import EventReason, EventType, MemberPhase
from quorumkeeper.controllers.base.base_controller import ControllerDependencies
from quorumkeeper.controllers.failover.health_observer import (
    observe_health,
    observe_members,
)
from quorumkeeper.controllers.failover.quorum_guard import QuorumGuard
from quorumkeeper.errors import ClientError, NotFoundError
from quorumkeeper.models.core.member_info import ClusterInfo, FailureMemberInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberState:
    """Tagged failover state of one member.

    ``healthy`` is the last observed health; members known only from a
    failure record count as healthy.
    """

    name: str
    member_id: str
    phase: MemberPhase
    since: datetime | None = None
    healthy: bool = True

    def unhealthy_for(self, now: datetime) -> float:
        """Seconds spent in the UNHEALTHY phase, 0.0 otherwise."""
        if self.phase != MemberPhase.UNHEALTHY or self.since is None:
            return 0.0
        return max(0.0, (now - self.since).total_seconds())

    @property
    def blocks_recovery(self) -> bool:
        """True while this member still keeps a failover episode open."""
        if self.phase in (MemberPhase.UNHEALTHY, MemberPhase.FAILED):
            return True
        return not self.healthy


@dataclass
class TrackResult:
    """What one tracking pass observed and changed."""

    unhealthy: list[str] = field(default_factory=list)
    newly_failed: list[str] = field(default_factory=list)
    deferred: dict[str, str] = field(default_factory=dict)


def member_states(cluster: ClusterInfo, now: datetime) -> dict[str, MemberState]:
    """Derive the state of every known member, keyed by pod name.

    A failure record overrides the observed health of the same member.
    """
    status = cluster.status
    states: dict[str, MemberState] = {}
    observed = observe_health(status, now)
    for name, health in observed.items():
        phase = MemberPhase.HEALTHY if health.healthy else MemberPhase.UNHEALTHY
        states[name] = MemberState(
            name, health.member_id, phase, health.unhealthy_since, health.healthy
        )
    for name, failure in status.failure_members.items():
        phase = MemberPhase.DELETED if failure.member_deleted else MemberPhase.FAILED
        health = observed.get(name)
        states[name] = MemberState(
            name,
            failure.member_id,
            phase,
            failure.created_at,
            health.healthy if health is not None else True,
        )
    return states


class FailureTracker:
    """Marks members that stayed unhealthy past the deadline as failed."""

    def __init__(self, deps: ControllerDependencies) -> None:
        self.deps = deps

    def failover_cap(self, cluster: ClusterInfo) -> int:
        """Maximum number of concurrent failure members for ``cluster``."""
        if cluster.max_failover_count is not None:
            return cluster.max_failover_count
        return self.deps.settings.max_failover_count

    def _record_unhealthy(self, cluster: ClusterInfo, now: datetime) -> list[str]:
        """Emit one diagnostic event per unhealthy entry of each member view."""
        status = cluster.status
        unhealthy: list[str] = []
        for members in (status.members, status.peer_members):
            view = observe_members(members, now)
            for name in sorted(view):
                health = view[name]
                if health.healthy:
                    continue
                unhealthy.append(name)
                self.deps.events.record(
                    cluster.name,
                    EventType.WARNING,
                    EventReason.UNHEALTHY,
                    f"{name}({health.member_id}) is unhealthy",
                )
        return unhealthy

    async def _attached_claim_uids(self, cluster: ClusterInfo, pod_name: str) -> set[str]:
        """Uids of the claims mounted by ``pod_name``; empty when unknown."""
        namespace = cluster.namespace
        try:
            pod = await self.deps.pods.get(namespace, pod_name)
        except ClientError as exc:
            logger.warning(
                "Cannot locate pod %s/%s to record its claims: %s", namespace, pod_name, exc
            )
            return set()

        uids: set[str] = set()
        for claim_name in pod.claim_names:
            try:
                claim = await self.deps.claims.get(namespace, claim_name)
            except NotFoundError:
                logger.warning(
                    "Claim %s/%s mounted by %s not found", namespace, claim_name, pod_name
                )
                continue
            except ClientError as exc:
                logger.warning(
                    "Cannot read claim %s/%s mounted by %s: %s",
                    namespace,
                    claim_name,
                    pod_name,
                    exc,
                )
                continue
            if claim.uid:
                uids.add(claim.uid)
        return uids

    def _deferral_reason(
        self,
        cluster: ClusterInfo,
        state: MemberState,
        guard: QuorumGuard,
        now: datetime,
    ) -> str | None:
        """Return why ``state`` may not move to FAILED, or None if it may."""
        deadline = self.deps.settings.failover_deadline
        if state.since is None or now - state.since <= deadline:
            return (
                f"unhealthy for {state.unhealthy_for(now):.0f}s, "
                f"deadline is {deadline.total_seconds():.0f}s"
            )
        decision = guard.approve(state.member_id)
        if not decision.approved:
            return decision.reason
        cap = self.failover_cap(cluster)
        if len(cluster.status.failure_members) >= cap:
            return (
                f"{len(cluster.status.failure_members)} failure members "
                f"already reach max failover count {cap}"
            )
        return None

    async def track(self, cluster: ClusterInfo, now: datetime) -> TrackResult:
        """Run one tracking pass, moving UNHEALTHY members to FAILED when allowed."""
        status = cluster.status
        result = TrackResult(unhealthy=self._record_unhealthy(cluster, now))
        guard = QuorumGuard(status)

        for name, state in sorted(member_states(cluster, now).items()):
            if state.phase != MemberPhase.UNHEALTHY:
                continue

            reason = self._deferral_reason(cluster, state, guard, now)
            if reason is not None:
                logger.info(
                    "Cluster %s/%s: member %s(%s) stays unhealthy: %s",
                    cluster.namespace,
                    cluster.name,
                    name,
                    state.member_id,
                    reason,
                )
                result.deferred[name] = reason
                continue

            claim_uids = await self._attached_claim_uids(cluster, name)
            status.failure_members[name] = FailureMemberInfo(
                pod_name=name,
                member_id=state.member_id,
                claim_uids=claim_uids,
                member_deleted=False,
                created_at=now,
            )
            result.newly_failed.append(name)
            logger.info(
                "Cluster %s/%s: marked member %s(%s) as failure with %d claims",
                cluster.namespace,
                cluster.name,
                name,
                state.member_id,
                len(claim_uids),
            )
            self.deps.events.record(
                cluster.name,
                EventType.WARNING,
                EventReason.MARKED_FAILURE,
                f"{cluster.namespace}/{name}({state.member_id}) is unhealthy "
                f"for more than {self.deps.settings.failover_deadline}, marked for removal",
            )

        return result
