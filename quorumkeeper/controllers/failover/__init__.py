"""Failover domain: health, quorum, failure tracking, reaping and recovery."""

from quorumkeeper.controllers.failover.controller import (
    FailoverController,
    FailoverResult,
)
from quorumkeeper.controllers.failover.failure_tracker import (
    FailureTracker,
    MemberState,
    TrackResult,
    member_states,
)
from quorumkeeper.controllers.failover.health_observer import (
    MemberHealth,
    observe_health,
    observe_members,
)
from quorumkeeper.controllers.failover.member_reaper import (
    MemberReaper,
    parse_member_id,
)
from quorumkeeper.controllers.failover.quorum_guard import (
    QuorumDecision,
    QuorumGuard,
    check_removal,
    voting_set,
)
from quorumkeeper.controllers.failover.recovery import RecoveryReconciler

__all__ = [
    "FailoverController",
    "FailoverResult",
    "FailureTracker",
    "MemberHealth",
    "MemberReaper",
    "MemberState",
    "QuorumDecision",
    "QuorumGuard",
    "RecoveryReconciler",
    "TrackResult",
    "check_removal",
    "member_states",
    "observe_health",
    "observe_members",
    "parse_member_id",
    "voting_set",
]
