"""Base controller classes."""

from quorumkeeper.controllers.base.base_controller import (
    BaseController,
    ControllerDependencies,
    PassResult,
    PassTimerMixin,
)

__all__ = [
    "BaseController",
    "ControllerDependencies",
    "PassResult",
    "PassTimerMixin",
]
