"""Slash-command detector module.

Comments such as ``/deploy staging`` are instructions to automation, not
conversation, and are flagged so the scoring pipeline can skip them.
"""

import re
from typing import Final

from contribution_scoring.domain.events import (
    PLATFORM_EVENT_TYPES,
    EventEnvelope,
    EventTypeMatcher,
)
from contribution_scoring.domain.models import (
    Diagnostic,
    PipelineResult,
    SlashCommandConfig,
)
from contribution_scoring.services.payload_extractor import extract_content

COMMAND_PATTERN: Final[re.Pattern[str]] = re.compile(r"^/(\w+)")


class SlashCommandDetector:
    """Set ``is_slash_command`` and ``content`` on the result."""

    name = "slash-command-detector"

    def __init__(
        self,
        config: SlashCommandConfig | None = None,
        supported_event_types: EventTypeMatcher = PLATFORM_EVENT_TYPES,
    ) -> None:
        self.config = config or SlashCommandConfig()
        self.supported_event_types = supported_event_types
        self.excluded_commands = frozenset(self.config.exclude_commands)

    def can_process(self, event: EventEnvelope) -> bool:
        return self.supported_event_types.matches(event.type)

    def is_slash_command(self, content: str) -> bool:
        """Check whether ``content`` starts with a non-excluded slash command.

        Example:
            >>> SlashCommandDetector().is_slash_command("  /help me")
            True
            >>> SlashCommandDetector().is_slash_command("see /etc/hosts")
            False
        """
        text = content.lstrip() if self.config.ignore_leading_whitespace else content
        if not text.startswith("/"):
            return False

        match = COMMAND_PATTERN.match(text)
        if match is None:
            return True
        return match.group(1) not in self.excluded_commands

    async def transform(
        self, event: EventEnvelope, result: PipelineResult
    ) -> PipelineResult:
        if result.filtered is True:
            return result

        content = result.content or extract_content(event)
        if not content:
            return result.with_diagnostic(Diagnostic.CONTENT_NOT_FOUND)

        return result.merge(
            is_slash_command=self.is_slash_command(content), content=content
        )
