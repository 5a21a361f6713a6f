"""Limit and threshold constants.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

FAILOVER_DEADLINE_SECONDS_MIN: Final = 0.0
MAX_FAILOVER_COUNT_MIN: Final = 0
STATUS_UPDATE_ATTEMPTS_MIN: Final = 1
STATUS_UPDATE_ATTEMPTS_MAX: Final = 16

# ============================================================================
# Member id limits
# ============================================================================

# Member ids are unsigned 64-bit integers.
MEMBER_ID_MAX: Final = 2**64 - 1

__all__ = [
    "FAILOVER_DEADLINE_SECONDS_MIN",
    "MAX_FAILOVER_COUNT_MIN",
    "MEMBER_ID_MAX",
    "STATUS_UPDATE_ATTEMPTS_MAX",
    "STATUS_UPDATE_ATTEMPTS_MIN",
]
