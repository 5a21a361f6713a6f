"""Collaborator contracts and in-memory implementations."""

from quorumkeeper.clients.interfaces import (
    ClaimDirectory,
    EventSink,
    MembershipClient,
    PodDirectory,
    StatusStore,
)
from quorumkeeper.clients.memory import (
    InMemoryClaimDirectory,
    InMemoryMembershipClient,
    InMemoryPodDirectory,
    InMemoryStatusStore,
    utcnow,
)

__all__ = [
    # Contracts
    "ClaimDirectory",
    "EventSink",
    # In-memory
    "InMemoryClaimDirectory",
    "InMemoryMembershipClient",
    "InMemoryPodDirectory",
    "InMemoryStatusStore",
    "MembershipClient",
    "PodDirectory",
    "StatusStore",
    "utcnow",
]
