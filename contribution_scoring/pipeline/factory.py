"""Factories assembling the default scoring chain and router."""

from __future__ import annotations

from contribution_scoring.config.logging_config import get_logger, setup_logging
from contribution_scoring.config.settings import Settings, get_settings
from contribution_scoring.domain.protocols import PipelineModule, Scorer
from contribution_scoring.modules.bot_detector import BotDetector
from contribution_scoring.modules.content_filter import ContentFilter
from contribution_scoring.modules.scoring_pipeline import ScoringPipeline
from contribution_scoring.modules.slash_command import SlashCommandDetector
from contribution_scoring.pipeline.chain import ChainRegistry, ModuleChain
from contribution_scoring.pipeline.router import EventRouter
from contribution_scoring.scorers.aggregator import ScoreAggregator, ScorerEntry
from contribution_scoring.scorers.readability_scorer import ReadabilityScorer
from contribution_scoring.scorers.technical_scorer import TechnicalScorer

logger = get_logger(__name__)


def initialize_logging(settings: Settings | None = None) -> None:
    """Initialize structlog-based logging from settings."""

    settings = settings or get_settings()
    setup_logging(log_level=settings.log_level, json_logs=settings.json_logs)
    logger.info(
        "logging_initialized", level=settings.log_level, json_logs=settings.json_logs
    )


def create_scorers(settings: Settings) -> list[Scorer]:
    """Build the configured scorers in aggregation order."""
    return [
        ReadabilityScorer(settings.readability),
        TechnicalScorer(settings.technical),
    ]


def create_aggregator(
    settings: Settings, scorers: list[Scorer] | None = None
) -> ScoreAggregator:
    """Wrap scorers with the weight overrides from ``settings.scoring``."""
    scoring = settings.scoring
    entries = [
        ScorerEntry(scorer, scoring.scorer_weights.get(scorer.id))
        for scorer in (scorers if scorers is not None else create_scorers(settings))
    ]
    return ScoreAggregator(entries, strategy=scoring.strategy, weight=scoring.weight)


def create_default_modules(settings: Settings) -> list[PipelineModule]:
    """Modules of the default chain, in execution order.

    The bot detector runs first so the content filter can reuse its
    decision; the scoring pipeline runs last.
    """
    return [
        BotDetector(settings.bot_detector),
        SlashCommandDetector(settings.slash_command),
        ContentFilter(settings.content_filter),
        ScoringPipeline(
            create_aggregator(settings),
            skip_slash_commands=settings.scoring.skip_slash_commands,
        ),
    ]


def create_default_chain(settings: Settings | None = None) -> ModuleChain:
    settings = settings or get_settings()
    return ModuleChain(settings.chain_name, create_default_modules(settings))


def create_router(
    settings: Settings | None = None,
    extra_chains: list[ModuleChain] | None = None,
) -> EventRouter:
    """Build a router with the default chain plus any ``extra_chains``."""
    registry = ChainRegistry([create_default_chain(settings), *(extra_chains or [])])
    return EventRouter(registry)
