"""Settings state models."""

from quorumkeeper.models.state.config_manager import ConfigManager
from quorumkeeper.models.state.failover_settings import (
    ConfigError,
    ConfigLoadError,
    FailoverSettings,
)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "FailoverSettings",
]
