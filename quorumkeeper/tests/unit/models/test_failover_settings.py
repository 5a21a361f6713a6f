"""Tests for failover settings and config loading."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from quorumkeeper.constants.defaults import (
    FAILOVER_DEADLINE_SECONDS_DEFAULT,
    FLOATING_TAGS_DEFAULT,
    MAX_FAILOVER_COUNT_DEFAULT,
)
from quorumkeeper.models.state.config_manager import ConfigManager
from quorumkeeper.models.state.failover_settings import (
    ConfigError,
    ConfigLoadError,
    FailoverSettings,
)


class TestFailoverSettings:
    """Tests for FailoverSettings."""

    def test_defaults(self) -> None:
        """Test defaults."""
        settings = FailoverSettings()
        assert settings.failover_deadline_seconds == FAILOVER_DEADLINE_SECONDS_DEFAULT
        assert settings.failover_deadline == timedelta(minutes=5)
        assert settings.max_failover_count == MAX_FAILOVER_COUNT_DEFAULT
        assert settings.floating_tags == FLOATING_TAGS_DEFAULT

    def test_aliases_and_field_names(self) -> None:
        """Test aliases and field names."""
        by_alias = FailoverSettings.model_validate({"failoverDeadlineSeconds": 60})
        by_name = FailoverSettings(failover_deadline_seconds=60)
        assert by_alias == by_name
        assert by_alias.failover_deadline == timedelta(seconds=60)

    def test_floating_tags_normalized(self) -> None:
        """Test floating tags normalized."""
        settings = FailoverSettings(floating_tags=[" edge ", "", "latest"])
        assert settings.floating_tags == ("edge", "latest")
        assert FailoverSettings(floating_tags="edge").floating_tags == ("edge",)

    def test_invalid_min_version_rejected(self) -> None:
        """Test invalid min version rejected."""
        with pytest.raises(ValidationError, match="not a semantic version"):
            FailoverSettings(live_status_min_version="five")

    def test_negative_cap_rejected(self) -> None:
        """Test negative cap rejected."""
        with pytest.raises(ValidationError):
            FailoverSettings(max_failover_count=-1)

    def test_settings_are_frozen(self) -> None:
        """Test settings are frozen."""
        settings = FailoverSettings()
        with pytest.raises(ValidationError):
            settings.max_failover_count = 5


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_none_path_gives_defaults(self) -> None:
        """Test none path gives defaults."""
        assert ConfigManager.load(None) == FailoverSettings()

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test missing file gives defaults."""
        assert ConfigManager.load(tmp_path / "absent.yaml") == FailoverSettings()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test empty file gives defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager.load(path) == FailoverSettings()

    def test_loads_nested_failover_section(self, tmp_path: Path) -> None:
        """Test loads nested failover section."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "failover:\n"
            "  failoverDeadlineSeconds: 120\n"
            "  maxFailoverCount: 1\n"
            "  floatingTags: [latest]\n",
            encoding="utf-8",
        )
        settings = ConfigManager.load(str(path))
        assert settings.failover_deadline == timedelta(minutes=2)
        assert settings.max_failover_count == 1
        assert settings.floating_tags == ("latest",)

    def test_loads_flat_document(self, tmp_path: Path) -> None:
        """Test loads flat document."""
        path = tmp_path / "settings.yaml"
        path.write_text("statusUpdateAttempts: 2\n", encoding="utf-8")
        assert ConfigManager.load(path).status_update_attempts == 2

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        """Test malformed yaml raises."""
        path = tmp_path / "settings.yaml"
        path.write_text("failover: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="cannot read settings"):
            ConfigManager.load(path)

    def test_invalid_values_raise(self) -> None:
        """Test invalid values raise."""
        with pytest.raises(ConfigLoadError, match="invalid settings in test"):
            ConfigManager.from_mapping({"maxFailoverCount": "many"}, source="test")

    def test_non_mapping_raises(self) -> None:
        """Test non mapping raises."""
        with pytest.raises(ConfigError, match="must be a mapping"):
            ConfigManager.from_mapping(["a", "b"])
