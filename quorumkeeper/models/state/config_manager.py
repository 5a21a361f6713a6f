"""Settings loading from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from quorumkeeper.models.state.failover_settings import (
    ConfigLoadError,
    FailoverSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads FailoverSettings from a YAML document."""

    @staticmethod
    def load(path: Path | str | None) -> FailoverSettings:
        """Load settings from ``path``.

        A missing path or file yields the defaults. Unreadable or invalid
        content raises ConfigLoadError.
        """
        if path is None:
            return FailoverSettings()

        settings_path = Path(path).expanduser()
        if not settings_path.exists():
            logger.info("Settings file %s not found, using defaults", settings_path)
            return FailoverSettings()

        try:
            with settings_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"cannot read settings {settings_path}: {exc}") from exc

        return ConfigManager.from_mapping(raw, source=str(settings_path))

    @staticmethod
    def from_mapping(raw: object, source: str = "<mapping>") -> FailoverSettings:
        """Validate an already-parsed settings mapping."""
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"settings in {source} must be a mapping")
        # Settings may be nested under a top-level "failover" key.
        payload = raw.get("failover", raw)
        try:
            return FailoverSettings.model_validate(payload)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings in {source}: {exc}") from exc
