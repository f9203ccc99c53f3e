"""Scoring pipeline module.

Runs the score aggregator inside a chain. Content that an earlier module
filtered, or that a bot or slash command produced, is left unscored.
"""

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.events import (
    ALL_EVENT_TYPES,
    EventEnvelope,
    EventTypeMatcher,
)
from contribution_scoring.domain.models import Diagnostic, PipelineResult
from contribution_scoring.scorers.aggregator import ScoreAggregator
from contribution_scoring.services.payload_extractor import extract_content

logger = get_logger(__name__)


class ScoringPipeline:
    """Attach ``scores`` and the aggregated ``score`` to the result."""

    name = "scoring-pipeline"

    def __init__(
        self,
        aggregator: ScoreAggregator,
        *,
        skip_slash_commands: bool = True,
        supported_event_types: EventTypeMatcher = ALL_EVENT_TYPES,
    ) -> None:
        self.aggregator = aggregator
        self.skip_slash_commands = skip_slash_commands
        self.supported_event_types = supported_event_types

    def can_process(self, event: EventEnvelope) -> bool:
        return self.supported_event_types.matches(event.type)

    def should_skip(self, result: PipelineResult) -> bool:
        if result.filtered is True or result.is_bot is True:
            return True
        return self.skip_slash_commands and result.is_slash_command is True

    async def transform(
        self, event: EventEnvelope, result: PipelineResult
    ) -> PipelineResult:
        if self.should_skip(result):
            logger.debug(
                "scoring_skipped",
                event_id=event.id,
                filtered=result.filtered,
                is_bot=result.is_bot,
                is_slash_command=result.is_slash_command,
            )
            return result

        content = result.content or extract_content(event)
        if not content:
            return result.with_diagnostic(Diagnostic.NO_SCORABLE_CONTENT)

        aggregated = await self.aggregator.score(content)
        scores = {
            scorer_id: individual.normalized_score
            for scorer_id, individual in aggregated.individual_scores.items()
        }
        logger.info(
            "content_scored",
            event_id=event.id,
            score=aggregated.normalized_score,
            strategy=aggregated.strategy.value,
            failed_scorers=aggregated.failed_scorers,
        )
        return result.merge(scores=scores, score=aggregated)
