"""Scalar constants.

Label keys and naming conventions shared with the surrounding operator.
"""

from typing import Final

# ============================================================================
# Labels
# ============================================================================

CONTROLLER_REVISION_LABEL: Final = "controller-revision-hash"
POD_NAME_LABEL: Final = "quorumkeeper.io/pod-name"

# ============================================================================
# Naming
# ============================================================================

MEMBER_COMPONENT: Final = "member"

# Tag an image reference resolves to when it carries none.
IMAGE_TAG_DEFAULT: Final = "latest"

__all__ = [
    "CONTROLLER_REVISION_LABEL",
    "IMAGE_TAG_DEFAULT",
    "MEMBER_COMPONENT",
    "POD_NAME_LABEL",
]
