"""Upgrade domain: version gate and partition stepping."""

from quorumkeeper.controllers.upgrade.upgrade_stepper import (
    UpgradeResult,
    UpgradeStepper,
    descending_ordinals,
    set_upgrade_partition,
    template_applied,
)
from quorumkeeper.controllers.upgrade.version_gate import (
    needs_live_status_check,
    resolve_tag,
)

__all__ = [
    "UpgradeResult",
    "UpgradeStepper",
    "descending_ordinals",
    "needs_live_status_check",
    "resolve_tag",
    "set_upgrade_partition",
    "template_applied",
]
