"""Quorum guard - decides whether losing a member preserves majority."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain

from quorumkeeper.models.core.member_info import ClusterStatus, MemberInfo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuorumDecision:
    """Outcome of a removal check. A rejection is a deferral, not an error."""

    candidate_id: str
    approved: bool
    healthy_excluding_candidate: int
    total_voters: int

    @property
    def reason(self) -> str:
        verdict = "keeps" if self.approved else "would break"
        return (
            f"removing member {self.candidate_id} {verdict} quorum: "
            f"{self.healthy_excluding_candidate} healthy of {self.total_voters} voters"
        )


def voting_set(status: ClusterStatus) -> dict[str, MemberInfo]:
    """Members and peer members deduplicated by id.

    A voter reported healthy by either view counts as healthy.
    """
    voters: dict[str, MemberInfo] = {}
    for member in chain(status.members.values(), status.peer_members.values()):
        current = voters.get(member.id)
        if current is None or (member.health and not current.health):
            voters[member.id] = member
    return voters


def check_removal(candidate_id: str, voters: dict[str, MemberInfo]) -> QuorumDecision:
    """Approve removal iff the remaining healthy voters are a strict majority."""
    healthy = sum(
        1 for member_id, member in voters.items()
        if member.health and member_id != candidate_id
    )
    total = len(voters)
    return QuorumDecision(
        candidate_id=candidate_id,
        approved=2 * healthy > total,
        healthy_excluding_candidate=healthy,
        total_voters=total,
    )


class QuorumGuard:
    """Quorum checks against one status snapshot."""

    def __init__(self, status: ClusterStatus) -> None:
        self._voters = voting_set(status)

    @property
    def total_voters(self) -> int:
        return len(self._voters)

    @property
    def voters(self) -> list[MemberInfo]:
        return list(self._voters.values())

    def approve(self, candidate_id: str) -> QuorumDecision:
        decision = check_removal(candidate_id, self._voters)
        if not decision.approved:
            logger.debug("Quorum guard rejected removal: %s", decision.reason)
        return decision
