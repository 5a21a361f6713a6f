"""All enum definitions for the failover and upgrade core.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Cluster Enums
# =============================================================================

class ClusterPhase(Enum):
    """Lifecycle phase of a managed component."""

    NORMAL = "Normal"
    UPGRADING = "Upgrading"
    SCALING = "Scaling"


class StoreState(Enum):
    """Operational state reported for a store by the database."""

    UP = "Up"
    DOWN = "Down"
    OFFLINE = "Offline"
    TOMBSTONE = "Tombstone"
    UNKNOWN = "Unknown"


class LiveStatus(Enum):
    """Status reported by a member's live status endpoint."""

    RUNNING = "Running"
    STOPPING = "Stopping"
    IDLE = "Idle"
    UNKNOWN = "Unknown"


class UpdateStrategyType(Enum):
    """Update strategy of a compute group."""

    ROLLING_UPDATE = "RollingUpdate"
    ON_DELETE = "OnDelete"


# =============================================================================
# Member State Enums
# =============================================================================

class MemberPhase(Enum):
    """Failover lifecycle of a single member."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    FAILED = "failed"
    DELETED = "deleted"


# =============================================================================
# Event Enums
# =============================================================================

class EventType(Enum):
    """Kubernetes event types."""

    NORMAL = "Normal"
    WARNING = "Warning"


class EventReason(Enum):
    """Reasons attached to recorded events."""

    UNHEALTHY = "Unhealthy"
    MARKED_FAILURE = "MemberMarkedAsFailure"
    MEMBER_DELETED = "FailureMemberDeleted"
    MANUAL_BYPASS = "UpdateStrategyModified"


# =============================================================================
# Upgrade Enums
# =============================================================================

class UpgradeAction(Enum):
    """What an upgrade step decided."""

    HELD = "held"  # blocked by another component or by scaling
    TEMPLATE_PENDING = "template_pending"
    UP_TO_DATE = "up_to_date"
    MANUAL_BYPASS = "manual_bypass"
    STEPPED = "stepped"
    COMPLETE = "complete"
