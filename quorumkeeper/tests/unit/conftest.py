"""Shared fixtures for quorumkeeper unit tests."""

from __future__ import annotations

import pytest

from quorumkeeper.clients.memory import (
    InMemoryClaimDirectory,
    InMemoryMembershipClient,
    InMemoryPodDirectory,
)
from quorumkeeper.controllers.base.base_controller import ControllerDependencies
from quorumkeeper.models.state.failover_settings import FailoverSettings
from quorumkeeper.tests.unit.builders import NOW
from quorumkeeper.utils.events import RecordingEventSink


@pytest.fixture
def pods() -> InMemoryPodDirectory:
    return InMemoryPodDirectory()


@pytest.fixture
def claims() -> InMemoryClaimDirectory:
    return InMemoryClaimDirectory()


@pytest.fixture
def membership() -> InMemoryMembershipClient:
    return InMemoryMembershipClient({0, 12891273174085095651, 2})


@pytest.fixture
def events() -> RecordingEventSink:
    return RecordingEventSink()


@pytest.fixture
def settings() -> FailoverSettings:
    return FailoverSettings()


@pytest.fixture
def deps(
    pods: InMemoryPodDirectory,
    claims: InMemoryClaimDirectory,
    membership: InMemoryMembershipClient,
    events: RecordingEventSink,
    settings: FailoverSettings,
) -> ControllerDependencies:
    return ControllerDependencies(
        pods=pods,
        claims=claims,
        membership=membership,
        events=events,
        settings=settings,
        clock=lambda: NOW,
    )
