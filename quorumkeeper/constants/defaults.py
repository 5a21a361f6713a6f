"""Default values for settings.

All default values used in the FailoverSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Failover defaults
# ============================================================================

FAILOVER_DEADLINE_SECONDS_DEFAULT: Final = 300.0  # 5 minutes
MAX_FAILOVER_COUNT_DEFAULT: Final = 3

# ============================================================================
# Upgrade defaults
# ============================================================================

# Tags that always point at a moving build and therefore always need the
# live status check.
FLOATING_TAGS_DEFAULT: Final = ("latest", "nightly")
# First version serving the live status endpoint.
LIVE_STATUS_MIN_VERSION_DEFAULT: Final = "5.1.2-0"

# ============================================================================
# Status update defaults
# ============================================================================

STATUS_UPDATE_ATTEMPTS_DEFAULT: Final = 4
STATUS_UPDATE_BACKOFF_SECONDS_DEFAULT: Final = 0.01
STATUS_UPDATE_BACKOFF_FACTOR_DEFAULT: Final = 5.0

__all__ = [
    "FAILOVER_DEADLINE_SECONDS_DEFAULT",
    "FLOATING_TAGS_DEFAULT",
    "LIVE_STATUS_MIN_VERSION_DEFAULT",
    "MAX_FAILOVER_COUNT_DEFAULT",
    "STATUS_UPDATE_ATTEMPTS_DEFAULT",
    "STATUS_UPDATE_BACKOFF_FACTOR_DEFAULT",
    "STATUS_UPDATE_BACKOFF_SECONDS_DEFAULT",
]
