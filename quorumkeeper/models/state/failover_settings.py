"""Failover and upgrade settings models."""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quorumkeeper.constants.defaults import (
    FAILOVER_DEADLINE_SECONDS_DEFAULT,
    FLOATING_TAGS_DEFAULT,
    LIVE_STATUS_MIN_VERSION_DEFAULT,
    MAX_FAILOVER_COUNT_DEFAULT,
    STATUS_UPDATE_ATTEMPTS_DEFAULT,
    STATUS_UPDATE_BACKOFF_FACTOR_DEFAULT,
    STATUS_UPDATE_BACKOFF_SECONDS_DEFAULT,
)
from quorumkeeper.constants.limits import (
    FAILOVER_DEADLINE_SECONDS_MIN,
    MAX_FAILOVER_COUNT_MIN,
    STATUS_UPDATE_ATTEMPTS_MAX,
    STATUS_UPDATE_ATTEMPTS_MIN,
)
from quorumkeeper.utils.version_parser import parse_version


class FailoverSettings(BaseModel):
    """Settings threaded into the failover and upgrade decisions."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Failover
    failover_deadline_seconds: float = Field(
        default=FAILOVER_DEADLINE_SECONDS_DEFAULT,
        ge=FAILOVER_DEADLINE_SECONDS_MIN,
        alias="failoverDeadlineSeconds",
    )
    max_failover_count: int = Field(
        default=MAX_FAILOVER_COUNT_DEFAULT,
        ge=MAX_FAILOVER_COUNT_MIN,
        alias="maxFailoverCount",
    )

    # Upgrade liveness gate
    floating_tags: tuple[str, ...] = Field(
        default=FLOATING_TAGS_DEFAULT, alias="floatingTags"
    )
    live_status_min_version: str = Field(
        default=LIVE_STATUS_MIN_VERSION_DEFAULT, alias="liveStatusMinVersion"
    )

    # Optimistic-concurrency status updates
    status_update_attempts: int = Field(
        default=STATUS_UPDATE_ATTEMPTS_DEFAULT,
        ge=STATUS_UPDATE_ATTEMPTS_MIN,
        le=STATUS_UPDATE_ATTEMPTS_MAX,
        alias="statusUpdateAttempts",
    )
    status_update_backoff_seconds: float = Field(
        default=STATUS_UPDATE_BACKOFF_SECONDS_DEFAULT,
        ge=0.0,
        alias="statusUpdateBackoffSeconds",
    )
    status_update_backoff_factor: float = Field(
        default=STATUS_UPDATE_BACKOFF_FACTOR_DEFAULT,
        ge=1.0,
        alias="statusUpdateBackoffFactor",
    )

    @field_validator("floating_tags", mode="before")
    @classmethod
    def _normalize_floating_tags(cls, value: object) -> tuple[str, ...]:
        if isinstance(value, str):
            value = [value]
        return tuple(str(tag).strip() for tag in value if str(tag).strip())

    @field_validator("live_status_min_version")
    @classmethod
    def _validate_min_version(cls, value: str) -> str:
        if parse_version(value) is None:
            raise ValueError(f"not a semantic version: {value!r}")
        return value

    @property
    def failover_deadline(self) -> timedelta:
        """Unhealthy duration after which a member may be marked failed."""
        return timedelta(seconds=self.failover_deadline_seconds)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
