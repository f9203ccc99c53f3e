"""Contribution scoring: filter and score collaboration-platform content."""

from contribution_scoring.domain.events import EventEnvelope, create_event, event_types
from contribution_scoring.domain.models import (
    AggregatedScorerResult,
    AggregationStrategy,
    FilterReason,
    PipelineResult,
    ScorerResult,
)
from contribution_scoring.pipeline import (
    ChainRegistry,
    EventRouter,
    ModuleChain,
    create_default_chain,
    create_router,
)

__all__ = [
    "AggregatedScorerResult",
    "AggregationStrategy",
    "ChainRegistry",
    "EventEnvelope",
    "EventRouter",
    "FilterReason",
    "ModuleChain",
    "PipelineResult",
    "ScorerResult",
    "create_default_chain",
    "create_event",
    "create_router",
    "event_types",
]
