"""Version gate - decides when an upgraded member needs a live status check."""

from __future__ import annotations

from collections.abc import Iterable

from quorumkeeper.constants.values import IMAGE_TAG_DEFAULT
from quorumkeeper.utils.version_parser import parse_version


def resolve_tag(tag: str | None) -> str:
    """Return ``tag``, or the default tag when the image carries none."""
    return (tag or "").strip() or IMAGE_TAG_DEFAULT


def needs_live_status_check(
    tag: str | None,
    floating_tags: Iterable[str],
    min_version: str,
) -> bool:
    """Return True when ``tag`` runs a build that serves the live status endpoint.

    Untagged images resolve to the default tag. Floating tags always engage
    the check. Otherwise the tag must parse as a semantic version at or
    above ``min_version``; unparsable tags skip it.
    """
    tag = resolve_tag(tag)
    if tag in set(floating_tags):
        return True
    version = parse_version(tag)
    minimum = parse_version(min_version)
    if version is None or minimum is None:
        return False
    return version >= minimum
