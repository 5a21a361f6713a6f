"""Image tag to semantic version parsing."""

from __future__ import annotations

from semver import Version


def parse_version(tag: str | None) -> Version | None:
    """Parse an image tag such as ``v5.1.2`` into a comparable Version.

    Returns None when the tag is not a semantic version.
    """
    if not tag:
        return None
    text = tag.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    try:
        return Version.parse(text, optional_minor_and_patch=True)
    except (ValueError, TypeError):
        return None
