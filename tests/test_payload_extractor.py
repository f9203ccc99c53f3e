"""Tests for payload field extraction."""

import pytest

from contribution_scoring.services.payload_extractor import (
    ContentAndAuthor,
    extract_author,
    extract_content,
    extract_content_and_author,
    get_path,
    has_platform_bot_flag,
)


def test_get_path_walks_nested_mappings() -> None:
    data = {"comment": {"user": {"login": "octocat"}}}

    assert get_path(data, "comment.user.login") == "octocat"
    assert get_path(data, "comment.user.missing") is None
    assert get_path({"comment": "text"}, "comment.user") is None
    assert get_path(None, "comment") is None
    assert get_path(["a"], "0") is None


@pytest.mark.parametrize(
    ("event_type", "data", "author", "content"),
    [
        (
            "com.github.issue_comment.created",
            {"comment": {"body": "Nice fix", "user": {"login": "octocat"}}},
            "octocat",
            "Nice fix",
        ),
        (
            "com.github.issues.opened",
            {"issue": {"body": "Crash on start", "user": {"login": "alice"}}},
            "alice",
            "Crash on start",
        ),
        (
            "com.github.pull_request.opened",
            {"pull_request": {"body": "Adds retries", "user": {"login": "bob"}}},
            "bob",
            "Adds retries",
        ),
        (
            "com.google-docs.document.edited",
            {"document": {"author": "carol", "content": "Design notes"}},
            "carol",
            "Design notes",
        ),
        (
            "com.telegram.message.sent",
            {"message": {"text": "Deploy is done", "from": {"username": "dave"}}},
            "dave",
            "Deploy is done",
        ),
    ],
)
def test_platform_specific_paths(
    make_event, event_type: str, data: dict, author: str, content: str
) -> None:
    """Each platform event type reads its own author and content fields."""
    event = make_event(event_type, data)

    assert extract_author(event) == author
    assert extract_content(event) == content


def test_known_type_does_not_fall_back_to_generic_fields(make_event) -> None:
    """A GitHub comment without comment.body is not scored from other fields."""
    event = make_event(
        "com.github.issue_comment.created",
        {"body": "stray", "author": "someone", "comment": {}},
    )

    assert extract_content(event) is None
    assert extract_author(event) is None


def test_unknown_type_uses_fallback_fields(make_event) -> None:
    event = make_event(
        "com.example.note.created",
        {"text": "Meeting notes", "user": {"login": "erin"}},
    )

    assert extract_content(event) == "Meeting notes"
    assert extract_author(event) == "erin"


def test_non_string_values_are_ignored(make_event) -> None:
    event = make_event(
        "com.github.issue_comment.created",
        {"comment": {"body": 42, "user": {"login": ""}}},
    )

    assert extract_content(event) is None
    assert extract_author(event) is None


def test_missing_payload_yields_nothing(make_event) -> None:
    event = make_event("com.github.issue_comment.created")

    assert extract_content_and_author(event) == ContentAndAuthor(None, None)


def test_pre_extracted_shape_takes_precedence(make_event) -> None:
    event = make_event(
        "com.github.issue_comment.created",
        {
            "content": "Already extracted",
            "metadata": {"author": "frank"},
            "comment": {"body": "raw body", "user": {"login": "grace"}},
        },
    )

    assert extract_content_and_author(event) == ContentAndAuthor(
        "Already extracted", "frank"
    )


def test_content_without_metadata_is_not_pre_extracted(make_event) -> None:
    event = make_event(
        "com.github.issue_comment.created",
        {"content": "ignored", "comment": {"body": "raw", "user": {"login": "g"}}},
    )

    assert extract_content_and_author(event) == ContentAndAuthor("raw", "g")


@pytest.mark.parametrize(
    "user",
    [{"login": "app", "type": "Bot"}, {"login": "x", "bot": True}],
)
def test_platform_bot_flag_on_github_user(make_event, user: dict) -> None:
    event = make_event("com.github.issue_comment.created", {"comment": {"user": user}})

    assert has_platform_bot_flag(event) is True


def test_platform_bot_flag_on_telegram_sender(make_event) -> None:
    event = make_event(
        "com.telegram.message.sent",
        {"message": {"from": {"username": "helper", "is_bot": True}}},
    )

    assert has_platform_bot_flag(event) is True


def test_regular_users_have_no_platform_bot_flag(make_event) -> None:
    event = make_event(
        "com.github.issue_comment.created",
        {"comment": {"user": {"login": "octocat", "type": "User"}}, "sender": None},
    )

    assert has_platform_bot_flag(event) is False


def test_bot_flag_ignores_issue_opener_on_comments(make_event) -> None:
    """A human comment on an issue opened by a bot is not flagged."""
    event = make_event(
        "com.github.issue_comment.created",
        {
            "comment": {"user": {"login": "octocat", "type": "User"}},
            "issue": {"user": {"login": "dependabot[bot]", "type": "Bot"}},
            "sender": {"login": "some-app[bot]", "type": "Bot"},
        },
    )

    assert has_platform_bot_flag(event) is False


def test_bot_flag_falls_back_to_sender_for_unknown_types(make_event) -> None:
    event = make_event(
        "com.example.note.created",
        {"text": "notes", "sender": {"login": "sync-app", "type": "Bot"}},
    )

    assert has_platform_bot_flag(event) is True
