"""Defensive field extraction from event payloads.

Handles:
- Dotted-path access that never raises on missing or malformed data
- Author and content lookup per platform event type
- The analyzer's pre-extracted ``{content, metadata: {author}}`` shape
- Platform bot indicators on user objects
"""

from collections.abc import Mapping
from typing import Any, Final, NamedTuple

from contribution_scoring.domain.events import EventEnvelope

AUTHOR_PATHS: Final[tuple[tuple[str, str], ...]] = (
    ("github.issue_comment", "comment.user.login"),
    ("github.issues", "issue.user.login"),
    ("github.pull_request", "pull_request.user.login"),
    ("google-docs.document", "document.author"),
    ("telegram.message", "message.from.username"),
)
"""(event type fragment, author path), first matching fragment wins."""

FALLBACK_AUTHOR_PATHS: Final[tuple[str, ...]] = ("author", "user.login", "sender.login")

CONTENT_PATHS: Final[tuple[tuple[str, str], ...]] = (
    ("github.issue_comment", "comment.body"),
    ("github.issues", "issue.body"),
    ("github.pull_request", "pull_request.body"),
    ("google-docs.document", "document.content"),
    ("telegram.message", "message.text"),
)

FALLBACK_CONTENT_PATHS: Final[tuple[str, ...]] = ("content", "body", "text")

USER_OBJECT_PATHS: Final[tuple[tuple[str, str], ...]] = (
    ("github.issue_comment", "comment.user"),
    ("github.issues", "issue.user"),
    ("github.pull_request", "pull_request.user"),
    ("telegram.message", "message.from"),
)
"""(event type fragment, user object of the item's author)."""

FALLBACK_USER_OBJECT_PATHS: Final[tuple[str, ...]] = ("user", "sender")


class ContentAndAuthor(NamedTuple):
    """Scorable text and its author; either may be missing."""

    content: str | None
    author: str | None


def get_path(data: Any, path: str) -> Any:
    """Walk ``data`` along a dotted path.

    Args:
        data: Payload (usually a dict)
        path: Dotted key path, e.g. ``comment.user.login``

    Returns:
        The value at ``path`` or None if any step is missing

    Example:
        >>> get_path({"comment": {"user": {"login": "octocat"}}}, "comment.user.login")
        'octocat'
        >>> get_path({"comment": None}, "comment.user.login") is None
        True
    """
    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _first_text(data: Any, paths: tuple[str, ...]) -> str | None:
    for path in paths:
        value = _as_text(get_path(data, path))
        if value is not None:
            return value
    return None


def _typed_path(event_type: str, table: tuple[tuple[str, str], ...]) -> str | None:
    for fragment, path in table:
        if fragment in event_type:
            return path
    return None


def extract_author(event: EventEnvelope) -> str | None:
    """Extract the author login/username for ``event``.

    Known platform event types read their specific path only; other types
    fall back to common field names.
    """
    path = _typed_path(event.type, AUTHOR_PATHS)
    if path is not None:
        return _as_text(get_path(event.data, path))
    return _first_text(event.data, FALLBACK_AUTHOR_PATHS)


def extract_content(event: EventEnvelope) -> str | None:
    """Extract the scorable text for ``event``."""
    path = _typed_path(event.type, CONTENT_PATHS)
    if path is not None:
        return _as_text(get_path(event.data, path))
    return _first_text(event.data, FALLBACK_CONTENT_PATHS)


def extract_content_and_author(event: EventEnvelope) -> ContentAndAuthor:
    """Extract content and author, preferring the pre-extracted shape.

    Example:
        >>> from contribution_scoring.domain.events import create_event
        >>> event = create_event(
        ...     "com.github.issue_comment.created",
        ...     "github",
        ...     {"content": "Looks good", "metadata": {"author": "octocat"}},
        ... )
        >>> extract_content_and_author(event)
        ContentAndAuthor(content='Looks good', author='octocat')
    """
    pre_extracted = _as_text(get_path(event.data, "content"))
    if pre_extracted is not None and isinstance(
        get_path(event.data, "metadata"), Mapping
    ):
        return ContentAndAuthor(
            pre_extracted, _as_text(get_path(event.data, "metadata.author"))
        )
    return ContentAndAuthor(extract_content(event), extract_author(event))


def _is_bot_user(user: Any) -> bool:
    if not isinstance(user, Mapping):
        return False
    return (
        user.get("type") == "Bot"
        or user.get("bot") is True
        or user.get("is_bot") is True
    )


def has_platform_bot_flag(event: EventEnvelope) -> bool:
    """Check whether the author's user object is marked as a bot.

    Only the user who wrote the item counts: the opener of the issue a
    comment belongs to, or the ``sender`` of a GitHub delivery, does not.
    GitHub marks app accounts with ``type: "Bot"``, some exports use
    ``bot: true`` and Telegram sets ``is_bot: true``.
    """
    path = _typed_path(event.type, USER_OBJECT_PATHS)
    if path is not None:
        return _is_bot_user(get_path(event.data, path))
    return any(
        _is_bot_user(get_path(event.data, fallback))
        for fallback in FALLBACK_USER_OBJECT_PATHS
    )
