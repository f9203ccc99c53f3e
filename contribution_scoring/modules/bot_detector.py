"""Bot detector module.

Flags content authored by automation accounts so it can be excluded
from contributor scoring.
"""

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.events import (
    PLATFORM_EVENT_TYPES,
    EventEnvelope,
    EventTypeMatcher,
)
from contribution_scoring.domain.models import (
    BotDetectorConfig,
    Diagnostic,
    PipelineResult,
)
from contribution_scoring.services.bot_policy import BotPolicy
from contribution_scoring.services.payload_extractor import (
    extract_author,
    has_platform_bot_flag,
)

logger = get_logger(__name__)


class BotDetector:
    """Set ``is_bot`` and ``author`` on the result."""

    name = "bot-detector"

    def __init__(
        self,
        config: BotDetectorConfig | None = None,
        supported_event_types: EventTypeMatcher = PLATFORM_EVENT_TYPES,
    ) -> None:
        self.config = config or BotDetectorConfig()
        self.supported_event_types = supported_event_types
        self.policy = BotPolicy(
            name_markers=self.config.automation_names,
            allow_list=self.config.allow_list,
        )

    def can_process(self, event: EventEnvelope) -> bool:
        return self.supported_event_types.matches(event.type)

    async def transform(
        self, event: EventEnvelope, result: PipelineResult
    ) -> PipelineResult:
        if result.filtered is True:
            return result

        author = result.author or extract_author(event)
        if not author:
            logger.debug("bot_detector_author_missing", event_type=event.type)
            return result.with_diagnostic(Diagnostic.AUTHOR_NOT_FOUND)

        platform_flag = self.config.check_platform_bot_flag and has_platform_bot_flag(
            event
        )
        is_bot = self.policy.is_bot(author, platform_flag=platform_flag)
        if is_bot:
            logger.debug("bot_author_detected", author=author, event_type=event.type)

        return result.merge(is_bot=is_bot, author=author)
