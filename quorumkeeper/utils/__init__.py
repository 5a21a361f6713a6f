"""Utility functions and classes for quorumkeeper."""

from quorumkeeper.utils.events import (
    LoggingEventSink,
    RecordedEvent,
    RecordingEventSink,
)
from quorumkeeper.utils.version_parser import parse_version

__all__ = [
    # Events
    "LoggingEventSink",
    "RecordedEvent",
    "RecordingEventSink",
    # Versions
    "parse_version",
]
