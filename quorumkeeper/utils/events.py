"""Event sinks: where per-transition cluster events are recorded."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quorumkeeper.constants.enums import EventReason, EventType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedEvent:
    """One human-readable event keyed to the owning cluster."""

    cluster: str
    event_type: EventType
    reason: EventReason
    message: str

    def __str__(self) -> str:
        return f"{self.event_type.value} {self.reason.value} {self.message}"


class LoggingEventSink:
    """Event sink that mirrors every event to the module logger."""

    def record(
        self,
        cluster: str,
        event_type: EventType,
        reason: EventReason,
        message: str,
    ) -> None:
        level = logging.WARNING if event_type == EventType.WARNING else logging.INFO
        logger.log(level, "[%s] %s: %s", cluster, reason.value, message)


class RecordingEventSink(LoggingEventSink):
    """Event sink that keeps events in memory, in emission order."""

    def __init__(self) -> None:
        self.events: list[RecordedEvent] = []

    def record(
        self,
        cluster: str,
        event_type: EventType,
        reason: EventReason,
        message: str,
    ) -> None:
        super().record(cluster, event_type, reason, message)
        self.events.append(RecordedEvent(cluster, event_type, reason, message))

    def messages(self) -> list[str]:
        """Return the rendered events."""
        return [str(event) for event in self.events]

    def by_reason(self, reason: EventReason) -> list[RecordedEvent]:
        """Return the events recorded with ``reason``."""
        return [event for event in self.events if event.reason == reason]

    def clear(self) -> None:
        """Drop all recorded events."""
        self.events.clear()
