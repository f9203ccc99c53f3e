"""Content filter module.

Rejects content that should not be scored. Rules are evaluated in a
fixed order and the first match wins:

1. Bot author (when bot exclusion is enabled)
2. Content shorter than the minimum length
3. Author on the exclusion list
4. Content matching a configured pattern

Rejections are data (``filtered=True`` plus a reason code), never
exceptions.
"""

import re

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.events import (
    PLATFORM_EVENT_TYPES,
    EventEnvelope,
    EventTypeMatcher,
)
from contribution_scoring.domain.models import (
    ContentFilterConfig,
    FilterReason,
    PipelineResult,
)
from contribution_scoring.services.bot_policy import BotPolicy
from contribution_scoring.services.payload_extractor import (
    ContentAndAuthor,
    extract_content_and_author,
)

logger = get_logger(__name__)


class ContentFilter:
    """Mark results as ``filtered`` with a ``FilterReason``."""

    name = "content-filter"

    def __init__(
        self,
        config: ContentFilterConfig | None = None,
        supported_event_types: EventTypeMatcher = PLATFORM_EVENT_TYPES,
    ) -> None:
        self.config = config or ContentFilterConfig()
        self.supported_event_types = supported_event_types
        self.bot_policy = BotPolicy(name_markers=self.config.bot_name_markers)
        self.excluded_users = frozenset(self.config.exclude_users)
        self.patterns = tuple(
            re.compile(pattern, re.IGNORECASE)
            for pattern in self.config.filter_patterns
        )

    def can_process(self, event: EventEnvelope) -> bool:
        return self.supported_event_types.matches(event.type)

    async def transform(
        self, event: EventEnvelope, result: PipelineResult
    ) -> PipelineResult:
        if result.filtered is True:
            return result

        content, author = self._content_and_author(event, result)
        if not content:
            return result.merge(filtered=False, reason=FilterReason.NO_CONTENT)

        reason = self.rejection_reason(content, author, upstream_is_bot=result.is_bot)
        if reason is not None:
            logger.debug(
                "content_filtered",
                reason=reason.value,
                author=author,
                event_type=event.type,
            )
            return result.merge(filtered=True, reason=reason)

        return result.merge(filtered=False, content=content, author=author)

    def rejection_reason(
        self,
        content: str,
        author: str | None,
        upstream_is_bot: bool | None = None,
    ) -> FilterReason | None:
        """Evaluate the rejection rules in order.

        Args:
            content: Text to check
            author: Author username, if known
            upstream_is_bot: Bot decision of an earlier bot detector, if any;
                it takes precedence over this filter's name heuristic

        Returns:
            The first matching reason, or None if the content passes
        """
        if self.config.exclude_bots and self._is_bot(author, upstream_is_bot):
            return FilterReason.BOT_AUTHOR

        if self.config.min_length and len(content) < self.config.min_length:
            return FilterReason.TOO_SHORT

        if author and author in self.excluded_users:
            return FilterReason.EXCLUDED_USER

        if any(pattern.search(content) for pattern in self.patterns):
            return FilterReason.MATCHED_PATTERN

        return None

    def _is_bot(self, author: str | None, upstream_is_bot: bool | None) -> bool:
        if upstream_is_bot is not None:
            return upstream_is_bot
        if not author:
            return False
        return self.bot_policy.is_bot(author)

    @staticmethod
    def _content_and_author(
        event: EventEnvelope, result: PipelineResult
    ) -> ContentAndAuthor:
        extracted = extract_content_and_author(event)
        if result.content:
            return ContentAndAuthor(result.content, result.author or extracted.author)
        return ContentAndAuthor(extracted.content, result.author or extracted.author)
