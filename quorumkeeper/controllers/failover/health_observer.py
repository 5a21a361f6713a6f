"""Health observer - pure evaluation of member health from cluster status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone

from quorumkeeper.models.core.member_info import ClusterStatus, MemberInfo


@dataclass(frozen=True)
class MemberHealth:
    """Observed health of one member at a point in time."""

    name: str
    member_id: str
    healthy: bool
    unhealthy_since: datetime | None = None

    def unhealthy_for(self, now: datetime) -> float:
        """Seconds the member has been unhealthy, 0.0 when healthy."""
        if self.healthy or self.unhealthy_since is None:
            return 0.0
        return max(0.0, (now - self.unhealthy_since).total_seconds())


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def observe_members(
    members: Mapping[str, MemberInfo], now: datetime
) -> dict[str, MemberHealth]:
    """Evaluate every member in ``members``.

    A zero transition timestamp means the transition was only just
    observed, so the unhealthy clock starts at ``now``.
    """
    observed: dict[str, MemberHealth] = {}
    for name, member in members.items():
        if member.health:
            observed[name] = MemberHealth(name, member.id, True)
            continue
        since = member.last_transition_time
        observed[name] = MemberHealth(
            name,
            member.id,
            False,
            as_utc(since) if since is not None else now,
        )
    return observed


def observe_health(status: ClusterStatus, now: datetime) -> dict[str, MemberHealth]:
    """Evaluate the primary member view of ``status``."""
    return observe_members(status.members, now)
