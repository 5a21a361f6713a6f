"""Constants module for quorumkeeper.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Label keys and naming conventions (Final)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
"""

from quorumkeeper.constants.defaults import (
    FAILOVER_DEADLINE_SECONDS_DEFAULT,
    FLOATING_TAGS_DEFAULT,
    LIVE_STATUS_MIN_VERSION_DEFAULT,
    MAX_FAILOVER_COUNT_DEFAULT,
)
from quorumkeeper.constants.enums import (
    ClusterPhase,
    EventReason,
    EventType,
    LiveStatus,
    MemberPhase,
    StoreState,
    UpdateStrategyType,
    UpgradeAction,
)
from quorumkeeper.constants.limits import MEMBER_ID_MAX
from quorumkeeper.constants.values import (
    CONTROLLER_REVISION_LABEL,
    IMAGE_TAG_DEFAULT,
    MEMBER_COMPONENT,
    POD_NAME_LABEL,
)

__all__ = [
    # Labels
    "CONTROLLER_REVISION_LABEL",
    # Defaults
    "FAILOVER_DEADLINE_SECONDS_DEFAULT",
    "FLOATING_TAGS_DEFAULT",
    "IMAGE_TAG_DEFAULT",
    "LIVE_STATUS_MIN_VERSION_DEFAULT",
    "MAX_FAILOVER_COUNT_DEFAULT",
    "MEMBER_COMPONENT",
    # Limits
    "MEMBER_ID_MAX",
    "POD_NAME_LABEL",
    # Enums
    "ClusterPhase",
    "EventReason",
    "EventType",
    "LiveStatus",
    "MemberPhase",
    "StoreState",
    "UpdateStrategyType",
    "UpgradeAction",
]
