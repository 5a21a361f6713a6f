"""Exception hierarchy for quorumkeeper.

Errors fall into two classes. Hard errors (``StatusNotSyncedError``,
``InvalidMemberIDError``) mean the pass must not act on the data it was
given. Everything else is retryable: the caller requeues the cluster and a
later pass resumes from the persisted status.

Deferrals (quorum would break, failover cap reached, cluster busy, manual
bypass) are not exceptions at all.
"""

from __future__ import annotations


class QuorumKeeperError(Exception):
    """Base exception for all quorumkeeper errors."""


class HardError(QuorumKeeperError):
    """Raised when a pass cannot safely continue; retrying will not help."""


class StatusNotSyncedError(HardError):
    """Raised when the cluster status is stale and health cannot be judged."""

    def __init__(self, namespace: str, name: str, component: str = "member") -> None:
        super().__init__(
            f"cluster [{namespace}/{name}]'s {component} status is not synced"
        )
        self.namespace = namespace
        self.name = name


class InvalidMemberIDError(HardError):
    """Raised when a stored member id is not a valid unsigned integer."""

    def __init__(self, pod_name: str, member_id: str, reason: str) -> None:
        super().__init__(
            f"failure member {pod_name} has invalid member id {member_id!r}: {reason}"
        )
        self.pod_name = pod_name
        self.member_id = member_id


class RequeueError(QuorumKeeperError):
    """Raised when a condition is not met yet and the pass should be retried."""


class ClientError(QuorumKeeperError):
    """Raised by collaborator clients when an external call fails."""


class NotFoundError(ClientError):
    """Raised when an object does not exist."""

    def __init__(self, kind: str, namespace: str, name: str) -> None:
        super().__init__(f"{kind} {namespace}/{name} not found")
        self.kind = kind
        self.namespace = namespace
        self.name = name


class ConflictError(ClientError):
    """Raised when an update was made against a stale resource version."""


def is_requeue_error(error: BaseException) -> bool:
    """Return True when the error should be retried by the work queue."""
    return isinstance(error, QuorumKeeperError) and not isinstance(error, HardError)
