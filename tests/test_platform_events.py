"""Tests for wrapping platform payloads into envelopes."""

from datetime import datetime

import pytz

from contribution_scoring.adapters.platform_events import (
    GITHUB_SOURCE_DEFAULT,
    envelope_from_github_webhook,
    envelope_from_google_document,
    envelope_from_telegram_update,
    standardize_event_type,
)
from contribution_scoring.services.payload_extractor import (
    extract_author,
    extract_content,
)


def test_standardize_event_type() -> None:
    assert (
        standardize_event_type("github", "Issue_Comment created")
        == "com.github.issue_comment.created"
    )
    assert standardize_event_type("telegram", " message  sent ") == (
        "com.telegram.message.sent"
    )


def test_github_webhook_envelope() -> None:
    payload = {
        "action": "created",
        "issue": {"number": 42},
        "comment": {"body": "Nice catch", "user": {"login": "octocat"}},
        "repository": {"html_url": "https://github.com/acme/widgets"},
    }

    event = envelope_from_github_webhook("issue_comment", payload, delivery_id="abc-1")

    assert event.type == "com.github.issue_comment.created"
    assert event.id == "abc-1"
    assert event.source == "https://github.com/acme/widgets"
    assert event.subject == "42"
    assert event.data == payload
    assert extract_author(event) == "octocat"
    assert extract_content(event) == "Nice catch"


def test_github_pull_request_envelope_defaults() -> None:
    event = envelope_from_github_webhook(
        "pull_request", {"action": "opened", "pull_request": {"number": 7}}
    )

    assert event.type == "com.github.pull_request.opened"
    assert event.source == GITHUB_SOURCE_DEFAULT
    assert event.subject == "7"
    assert event.id


def test_telegram_update_envelope() -> None:
    update = {
        "update_id": 5,
        "message": {
            "message_id": 9,
            "date": 1700000000,
            "text": "The deploy finished",
            "from": {"username": "alice", "is_bot": False},
            "chat": {"username": "devchat"},
        },
    }

    event = envelope_from_telegram_update(update)

    assert event.type == "com.telegram.message.sent"
    assert event.id == "telegram-5"
    assert event.source == "https://t.me/devchat"
    assert event.subject == "9"
    assert event.time == datetime.fromtimestamp(1700000000, tz=pytz.UTC)
    assert extract_author(event) == "alice"
    assert extract_content(event) == "The deploy finished"


def test_google_document_envelope() -> None:
    document = {"id": "doc-1", "author": "bob", "content": "Design notes"}

    event = envelope_from_google_document(document)

    assert event.type == "com.google-docs.document.edited"
    assert event.subject == "doc-1"
    assert extract_author(event) == "bob"
    assert extract_content(event) == "Design notes"
