"""Wrap platform payloads into event envelopes.

Only the envelope attributes are derived here (id, source, type,
subject); payloads are passed through untouched so modules read the
platform's own field names.
"""

import re
from datetime import datetime
from typing import Any, Final

import pytz

from contribution_scoring.domain.events import EventEnvelope, create_event
from contribution_scoring.services.payload_extractor import get_path

GITHUB_SOURCE_DEFAULT: Final[str] = "https://github.com"
TELEGRAM_SOURCE_DEFAULT: Final[str] = "https://t.me"
GOOGLE_DOCS_SOURCE_DEFAULT: Final[str] = "https://docs.google.com"

WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def standardize_event_type(platform: str, event_name: str) -> str:
    """Build a dot-namespaced event type for ``platform``.

    Example:
        >>> standardize_event_type("github", "Issue_Comment created")
        'com.github.issue_comment.created'
    """
    normalized = WHITESPACE_PATTERN.sub(".", event_name.strip().lower())
    return f"com.{platform}.{normalized}"


def envelope_from_github_webhook(
    event_name: str,
    payload: dict[str, Any],
    delivery_id: str | None = None,
) -> EventEnvelope:
    """Wrap a GitHub webhook delivery.

    Args:
        event_name: Value of the ``X-GitHub-Event`` header, e.g. ``issue_comment``
        payload: Webhook JSON body
        delivery_id: Value of the ``X-GitHub-Delivery`` header

    Returns:
        Envelope typed ``com.github.<event>.<action>``
    """
    action = payload.get("action")
    name = f"{event_name}.{action}" if action else event_name
    event_type = standardize_event_type("github", name)
    source = get_path(payload, "repository.html_url") or GITHUB_SOURCE_DEFAULT
    number = get_path(payload, "issue.number") or get_path(
        payload, "pull_request.number"
    )

    return create_event(
        event_type,
        source,
        payload,
        event_id=delivery_id,
        subject=str(number) if number is not None else None,
    )


def envelope_from_telegram_update(update: dict[str, Any]) -> EventEnvelope:
    """Wrap a Telegram Bot API update carrying a ``message``."""
    chat_username = get_path(update, "message.chat.username")
    source = (
        f"{TELEGRAM_SOURCE_DEFAULT}/{chat_username}"
        if chat_username
        else TELEGRAM_SOURCE_DEFAULT
    )

    timestamp = get_path(update, "message.date")
    time = (
        datetime.fromtimestamp(timestamp, tz=pytz.UTC)
        if isinstance(timestamp, int | float)
        else None
    )

    update_id = update.get("update_id")
    message_id = get_path(update, "message.message_id")
    return create_event(
        standardize_event_type("telegram", "message sent"),
        source,
        update,
        event_id=f"telegram-{update_id}" if update_id is not None else None,
        time=time,
        subject=str(message_id) if message_id is not None else None,
    )


def envelope_from_google_document(
    document: dict[str, Any], action: str = "edited"
) -> EventEnvelope:
    """Wrap an exported Google Docs document (``id``, ``author``, ``content``)."""
    document_id = document.get("id")
    return create_event(
        standardize_event_type("google-docs", f"document {action}"),
        GOOGLE_DOCS_SOURCE_DEFAULT,
        {"document": document},
        subject=str(document_id) if document_id is not None else None,
    )
