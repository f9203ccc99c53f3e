"""Helpers for correlation identifiers in logs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from uuid import uuid4

from contribution_scoring.config.logging_config import bind_context, unbind_context

CORRELATION_ID_KEY = "correlation_id"
EVENT_TYPE_KEY = "event_type"


@contextmanager
def correlation_scope(
    existing_id: str | None = None, *, event_type: str | None = None
) -> Iterator[str]:
    """Bind a correlation identifier (and event type) for the lifetime of the context."""

    correlation_id = existing_id or str(uuid4())
    context = {CORRELATION_ID_KEY: correlation_id}
    if event_type is not None:
        context[EVENT_TYPE_KEY] = event_type
    bind_context(**context)
    try:
        yield correlation_id
    finally:
        unbind_context(*context)


__all__ = ["CORRELATION_ID_KEY", "EVENT_TYPE_KEY", "correlation_scope"]
