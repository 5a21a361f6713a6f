"""Tests for version gate."""

from __future__ import annotations

import pytest

from quorumkeeper.constants.defaults import (
    FLOATING_TAGS_DEFAULT,
    LIVE_STATUS_MIN_VERSION_DEFAULT,
)
from quorumkeeper.controllers.upgrade.version_gate import (
    needs_live_status_check,
    resolve_tag,
)


def _check(tag: str | None) -> bool:
    return needs_live_status_check(
        tag, FLOATING_TAGS_DEFAULT, LIVE_STATUS_MIN_VERSION_DEFAULT
    )


class TestNeedsLiveStatusCheck:
    """Tests for needs_live_status_check."""

    @pytest.mark.parametrize("tag", ["latest", "nightly"])
    def test_floating_tags_engage_check(self, tag: str) -> None:
        """Test floating tags engage check."""
        assert _check(tag) is True

    @pytest.mark.parametrize("tag", ["v5.1.2", "5.1.2", "v5.1.2-0", "v5.2.0", "v6.0.0-alpha"])
    def test_versions_at_or_above_minimum(self, tag: str) -> None:
        """Test versions at or above minimum."""
        assert _check(tag) is True

    @pytest.mark.parametrize("tag", ["v5.1.1", "v5.0", "v4.0.14", "v5.1.1-rc.1"])
    def test_versions_below_minimum(self, tag: str) -> None:
        """Test versions below minimum."""
        assert _check(tag) is False

    @pytest.mark.parametrize("tag", ["stable", "lastest", "release-5.1"])
    def test_unparsable_tags_skip_check(self, tag: str) -> None:
        """Test unparsable tags skip check."""
        assert _check(tag) is False

    def test_custom_floating_tags(self) -> None:
        """Test custom floating tags."""
        assert needs_live_status_check("edge", ("edge",), "5.1.2-0") is True
        assert needs_live_status_check("latest", ("edge",), "5.1.2-0") is False

    @pytest.mark.parametrize("tag", ["", "  ", None])
    def test_untagged_image_engages_check(self, tag: str | None) -> None:
        """Test untagged image engages check."""
        assert resolve_tag(tag) == "latest"
        assert _check(tag) is True
