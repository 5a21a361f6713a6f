"""Tests for quorum guard."""

from __future__ import annotations

from quorumkeeper.controllers.failover.quorum_guard import (
    QuorumGuard,
    check_removal,
    voting_set,
)
from quorumkeeper.models.core.member_info import MemberInfo
from quorumkeeper.tests.unit.builders import make_cluster


class TestVotingSet:
    """Tests for voting_set deduplication."""

    def test_peer_members_extend_voters(self) -> None:
        """Test peer members extend voters."""
        cluster = make_cluster()
        cluster.status.peer_members["peer-a"] = MemberInfo(name="peer-a", id="100")
        cluster.status.peer_members["peer-b"] = MemberInfo(name="peer-b", id="101")
        assert set(voting_set(cluster.status)) == {
            "0",
            "12891273174085095651",
            "2",
            "100",
            "101",
        }

    def test_duplicate_ids_counted_once_healthy_view_wins(self) -> None:
        """Test duplicate ids counted once healthy view wins."""
        cluster = make_cluster((False, True, True))
        cluster.status.peer_members["test-member-0"] = MemberInfo(
            name="test-member-0", id="0", health=True
        )
        voters = voting_set(cluster.status)
        assert len(voters) == 3
        assert voters["0"].health is True

    def test_unhealthy_peer_does_not_override_healthy_member(self) -> None:
        """Test unhealthy peer does not override healthy member."""
        cluster = make_cluster()
        cluster.status.peer_members["test-member-0"] = MemberInfo(
            name="test-member-0", id="0", health=False
        )
        assert voting_set(cluster.status)["0"].health is True


class TestCheckRemoval:
    """Tests for the majority arithmetic."""

    def test_one_unhealthy_of_three_is_approved(self) -> None:
        """Test one unhealthy of three is approved."""
        cluster = make_cluster((True, False, True))
        decision = check_removal("12891273174085095651", voting_set(cluster.status))
        assert decision.approved is True
        assert decision.healthy_excluding_candidate == 2
        assert decision.total_voters == 3

    def test_two_unhealthy_of_three_is_rejected(self) -> None:
        """Test two unhealthy of three is rejected."""
        cluster = make_cluster((False, False, True))
        decision = check_removal("0", voting_set(cluster.status))
        assert decision.approved is False
        assert "would break quorum" in decision.reason

    def test_exactly_half_is_rejected(self) -> None:
        """Test exactly half is rejected."""
        voters = {
            str(i): MemberInfo(name=f"m{i}", id=str(i), health=i < 2) for i in range(4)
        }
        decision = check_removal("3", voters)
        assert decision.healthy_excluding_candidate == 2
        assert decision.approved is False

    def test_candidate_is_excluded_even_if_reported_healthy(self) -> None:
        """Test candidate is excluded even if reported healthy."""
        voters = {str(i): MemberInfo(name=f"m{i}", id=str(i)) for i in range(3)}
        decision = check_removal("0", voters)
        assert decision.healthy_excluding_candidate == 2
        assert decision.approved is True

    def test_healthy_peers_restore_quorum(self) -> None:
        """Test healthy peers restore quorum."""
        cluster = make_cluster((False, False, True))
        cluster.status.peer_members["peer-a"] = MemberInfo(name="peer-a", id="100")
        cluster.status.peer_members["peer-b"] = MemberInfo(name="peer-b", id="101")
        decision = QuorumGuard(cluster.status).approve("0")
        assert decision.total_voters == 5
        assert decision.healthy_excluding_candidate == 3
        assert decision.approved is True


class TestQuorumGuard:
    """Tests for QuorumGuard."""

    def test_total_voters(self) -> None:
        """Test total voters."""
        guard = QuorumGuard(make_cluster().status)
        assert guard.total_voters == 3
        assert len(guard.voters) == 3

    def test_rejection_is_a_value_not_an_exception(self) -> None:
        """Test rejection is a value not an exception."""
        guard = QuorumGuard(make_cluster((False, False, False)).status)
        assert guard.approve("0").approved is False

    def test_peer_view_keeps_cluster_in_quorum(self) -> None:
        """Test peer view keeps cluster in quorum."""
        cluster = make_cluster((False, False, True))
        cluster.status.peer_members["test-member-0"] = MemberInfo(
            name="test-member-0", id="0", health=True
        )
        cluster.status.peer_members["test-member-2"] = MemberInfo(
            name="test-member-2", id="2", health=True
        )
        decision = QuorumGuard(cluster.status).approve("12891273174085095651")
        assert decision.total_voters == 3
        assert decision.healthy_excluding_candidate == 2
        assert decision.approved is True
