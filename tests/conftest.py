"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from contribution_scoring.config.settings import Settings
from contribution_scoring.domain.events import EventEnvelope, create_event

GITHUB_COMMENT_TYPE = "com.github.issue_comment.created"

EventFactory = Callable[..., EventEnvelope]
CommentFactory = Callable[..., EventEnvelope]


@pytest.fixture
def make_event() -> EventFactory:
    """Factory building envelopes with a fixed source."""

    def _make(event_type: str, data: Any = None, **kwargs: Any) -> EventEnvelope:
        return create_event(event_type, "https://github.com/acme/widgets", data, **kwargs)

    return _make


@pytest.fixture
def github_comment(make_event: EventFactory) -> CommentFactory:
    """Factory building GitHub issue comment events."""

    def _make(
        body: str | None,
        login: str | None = "octocat",
        user_type: str = "User",
    ) -> EventEnvelope:
        comment: dict[str, Any] = {"id": 1001}
        if body is not None:
            comment["body"] = body
        if login is not None:
            comment["user"] = {"login": login, "type": user_type}
        return make_event(
            GITHUB_COMMENT_TYPE,
            {"action": "created", "issue": {"number": 42}, "comment": comment},
        )

    return _make


@pytest.fixture
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Settings:
    """Settings built from an empty working directory (model defaults only)."""
    monkeypatch.chdir(tmp_path)
    for name in ("LOG_LEVEL", "JSON_LOGS", "CHAIN_NAME"):
        monkeypatch.delenv(name, raising=False)
    return Settings()


@pytest.fixture
def technical_comment() -> str:
    """A realistic review comment with code and structure."""
    return (
        "## Summary\n"
        "The api call should await the promise before it returns the object.\n"
        "- wrap the call in try and catch the error\n"
        "- return a typed result, for example a string or null\n"
        "\n"
        "```ts\n"
        "async function fetchUser(userId: string) {\n"
        "  // load the user through the api client\n"
        "  return apiClient.get(userId);\n"
        "}\n"
        "```\n"
    )
