"""Event envelope and event-type capability matching.

The envelope follows the CloudEvents 1.0 attribute names so producers
(GitHub webhooks, Telegram updates, Google Docs exports) can be wrapped
without reshaping their payloads.
"""

import re
from collections.abc import Iterable
from datetime import datetime
from typing import Any, Final
from uuid import uuid4

import pytz
from pydantic import BaseModel, ConfigDict, Field, field_validator

CLOUDEVENTS_SPEC_VERSION: Final[str] = "1.0"
DEFAULT_CONTENT_TYPE: Final[str] = "application/json"

EVENT_TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[A-Za-z0-9_-]+(\.[A-Za-z0-9_-]+){2,}$"
)
"""Dot-namespaced type: ``<reverse-domain>.<entity>.<action>``."""


def _utc_now() -> datetime:
    return datetime.now(pytz.UTC)


class EventEnvelope(BaseModel):
    """Platform-agnostic wrapper around one incoming item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique event identifier")
    source: str = Field(..., min_length=1, description="Producer URI or name")
    type: str = Field(
        ..., description="Dot-namespaced event type, e.g. com.github.issues.opened"
    )
    time: datetime = Field(
        default_factory=_utc_now, description="Event timestamp (UTC)"
    )
    data: Any = Field(default=None, description="Producer-specific payload")
    subject: str | None = Field(
        default=None, description="Subject of the event within the source"
    )
    datacontenttype: str = Field(
        default=DEFAULT_CONTENT_TYPE, description="Media type of data"
    )
    specversion: str = Field(
        default=CLOUDEVENTS_SPEC_VERSION, description="CloudEvents spec version"
    )

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        if not EVENT_TYPE_PATTERN.match(value):
            raise ValueError(
                f"Event type '{value}' must be dot-namespaced "
                "(<reverse-domain>.<entity>.<action>)"
            )
        return value

    @field_validator("time")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=pytz.UTC)
        return value.astimezone(pytz.UTC)


def create_event(
    event_type: str,
    source: str,
    data: Any = None,
    *,
    event_id: str | None = None,
    time: datetime | None = None,
    subject: str | None = None,
    datacontenttype: str = DEFAULT_CONTENT_TYPE,
) -> EventEnvelope:
    """Build an event envelope, generating id and timestamp when omitted.

    Example:
        >>> event = create_event("com.github.issues.opened", "https://github.com")
        >>> event.specversion
        '1.0'
    """
    return EventEnvelope(
        id=event_id or str(uuid4()),
        source=source,
        type=event_type,
        time=time or _utc_now(),
        data=data,
        subject=subject,
        datacontenttype=datacontenttype,
    )


class ExactEventTypes:
    """Capability test matching an exact set of event types."""

    __slots__ = ("types",)

    def __init__(self, types: Iterable[str]) -> None:
        self.types = frozenset(types)

    def matches(self, event_type: str) -> bool:
        return event_type in self.types

    def __repr__(self) -> str:
        return f"ExactEventTypes({sorted(self.types)!r})"


class EventTypePattern:
    """Capability test matching event types against a regular expression.

    The pattern is searched, not anchored, so ``com\\.github\\.`` matches
    every GitHub event type.
    """

    __slots__ = ("pattern",)

    def __init__(self, pattern: str | re.Pattern[str]) -> None:
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def matches(self, event_type: str) -> bool:
        return self.pattern.search(event_type) is not None

    def __repr__(self) -> str:
        return f"EventTypePattern({self.pattern.pattern!r})"


EventTypeMatcher = ExactEventTypes | EventTypePattern


def event_types(spec: str | re.Pattern[str] | Iterable[str]) -> EventTypeMatcher:
    """Build a matcher: a string or compiled regex becomes a pattern,
    any other iterable becomes an exact set.

    Example:
        >>> event_types(["com.github.issues.opened"]).matches("com.github.issues.opened")
        True
        >>> event_types(r"com\\.telegram\\.").matches("com.telegram.message.sent")
        True
    """
    if isinstance(spec, str | re.Pattern):
        return EventTypePattern(spec)
    return ExactEventTypes(spec)


ALL_EVENT_TYPES: Final[EventTypePattern] = EventTypePattern(r".*")

PLATFORM_EVENT_TYPES: Final[EventTypePattern] = EventTypePattern(
    r"com\.(github|google-docs|telegram)\..*"
)
"""Event types produced by the supported collaboration platforms."""
