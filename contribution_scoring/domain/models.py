"""Domain models for contribution scoring.

All models use Pydantic v2 for validation and serialization.
"""

import math
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contribution_scoring.domain.scoring_constants import (
    DEFAULT_AUTOMATION_NAMES,
    DEFAULT_CODE_BLOCK_WEIGHT,
    DEFAULT_EXPLANATION_WEIGHT,
    DEFAULT_FILTER_BOT_MARKERS,
    DEFAULT_MIN_CONTENT_LENGTH,
    DEFAULT_READABILITY_TARGET,
    DEFAULT_TECHNICAL_TERMS_WEIGHT,
)


class FilterReason(str, Enum):
    """Reason code explaining why content was excluded from scoring."""

    NO_CONTENT = "no-content"
    BOT_AUTHOR = "bot-author"
    TOO_SHORT = "too-short"
    EXCLUDED_USER = "excluded-user"
    MATCHED_PATTERN = "matched-pattern"


class AggregationStrategy(str, Enum):
    """Rule combining several scorers into one score."""

    WEIGHTED_AVERAGE = "weighted-average"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


class Diagnostic(str, Enum):
    """Codes recorded when a module could not do its work on an event."""

    AUTHOR_NOT_FOUND = "author-not-found"
    CONTENT_NOT_FOUND = "content-not-found"
    NO_SCORABLE_CONTENT = "no-scorable-content"


def clamp_unit(value: float) -> float:
    """Clamp a score to [0, 1]; NaN becomes 0.

    Example:
        >>> clamp_unit(1.4)
        1.0
        >>> clamp_unit(float("nan"))
        0.0
    """
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


class ScorerResult(BaseModel):
    """Output of a single scorer."""

    raw_score: float = Field(..., description="Scorer-defined raw score (0-100)")
    normalized_score: float = Field(
        ..., description="Weighted normalized score, clamped to [0, 1]"
    )
    metrics: dict[str, Any] = Field(
        default_factory=dict, description="Scorer-specific metrics"
    )

    @field_validator("normalized_score")
    @classmethod
    def _clamp(cls, value: float) -> float:
        return clamp_unit(value)


class AggregatedScorerResult(ScorerResult):
    """Combined output of the score aggregator."""

    individual_scores: dict[str, ScorerResult] = Field(
        default_factory=dict, description="Per-scorer results keyed by scorer id"
    )
    strategy: AggregationStrategy = Field(
        default=AggregationStrategy.WEIGHTED_AVERAGE,
        description="Strategy used to combine scores",
    )
    weights: dict[str, float] = Field(
        default_factory=dict, description="Resolved weight per scorer id"
    )
    failed_scorers: list[str] = Field(
        default_factory=list, description="Scorer ids that raised and scored zero"
    )


class PipelineResult(BaseModel):
    """Result accumulator threaded through a module chain.

    Known fields are typed; modules may add their own keys (extra fields
    are allowed). Instances are immutable, use ``merge`` to derive an
    updated copy.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    filtered: bool | None = None
    reason: FilterReason | None = None
    is_bot: bool | None = None
    is_slash_command: bool | None = None
    author: str | None = None
    content: str | None = None
    scores: dict[str, float] | None = None
    score: AggregatedScorerResult | None = None
    diagnostics: list[str] | None = None

    def merge(self, **changes: Any) -> "PipelineResult":
        """Return a validated copy with ``changes`` applied on top."""
        return type(self).model_validate({**dict(self), **changes})

    def with_diagnostic(self, code: Diagnostic | str) -> "PipelineResult":
        """Return a copy with ``code`` appended to ``diagnostics``."""
        value = code.value if isinstance(code, Diagnostic) else code
        return self.merge(diagnostics=[*(self.diagnostics or []), value])

    def get(self, key: str, default: Any = None) -> Any:
        """Read a typed or extra field by name."""
        value = dict(self).get(key)
        return default if value is None else value

    def to_dict(self) -> dict[str, Any]:
        """Serialize, dropping fields no module has set."""
        return self.model_dump(mode="json", exclude_none=True)


class BotDetectorConfig(BaseModel):
    """Configuration for the bot detector module."""

    automation_names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_AUTOMATION_NAMES),
        description="Substrings identifying automation accounts (case-insensitive)",
    )
    allow_list: list[str] = Field(
        default_factory=list,
        description="Usernames never treated as bots (exact, case-insensitive)",
    )
    check_platform_bot_flag: bool = Field(
        default=True,
        description="Honor platform bot indicators on user objects",
    )


class SlashCommandConfig(BaseModel):
    """Configuration for the slash-command detector module."""

    ignore_leading_whitespace: bool = Field(
        default=True, description="Treat ' /cmd' like '/cmd'"
    )
    exclude_commands: list[str] = Field(
        default_factory=list,
        description="Commands (without slash) that are scored like normal comments",
    )


class ContentFilterConfig(BaseModel):
    """Configuration for the content filter module."""

    exclude_bots: bool = Field(default=True, description="Reject bot authors")
    min_length: int = Field(
        default=DEFAULT_MIN_CONTENT_LENGTH,
        ge=0,
        description="Minimum content length in characters (0 disables)",
    )
    exclude_users: list[str] = Field(
        default_factory=list, description="Authors whose content is rejected"
    )
    filter_patterns: list[str] = Field(
        default_factory=list,
        description="Regular expressions rejecting content (case-insensitive)",
    )
    bot_name_markers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILTER_BOT_MARKERS),
        description="Author substrings treated as bots when no detector ran",
    )

    @field_validator("filter_patterns")
    @classmethod
    def _validate_patterns(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                re.compile(pattern, re.IGNORECASE)
            except re.error as e:
                raise ValueError(f"Invalid filter pattern '{pattern}': {e}") from e
        return patterns


class ReadabilityScorerConfig(BaseModel):
    """Configuration for the readability scorer."""

    target_score: float = Field(
        default=DEFAULT_READABILITY_TARGET,
        description="Flesch reading ease that scores 1.0",
    )
    weight: float = Field(default=1.0, ge=0.0, description="Scorer weight")
    include_all_metrics: bool = Field(
        default=False, description="Also report grade-level indices"
    )


class TechnicalWeights(BaseModel):
    """Weights of the technical scorer sub-metrics (not renormalized)."""

    code_block_quality: float = Field(default=DEFAULT_CODE_BLOCK_WEIGHT, ge=0.0)
    technical_terms: float = Field(default=DEFAULT_TECHNICAL_TERMS_WEIGHT, ge=0.0)
    explanation_quality: float = Field(default=DEFAULT_EXPLANATION_WEIGHT, ge=0.0)


class TechnicalScorerConfig(BaseModel):
    """Configuration for the technical scorer."""

    weight: float = Field(default=1.0, ge=0.0, description="Scorer weight")
    weights: TechnicalWeights = Field(default_factory=TechnicalWeights)


class ScoringConfig(BaseModel):
    """Configuration for score aggregation and the scoring pipeline module."""

    strategy: AggregationStrategy = Field(
        default=AggregationStrategy.WEIGHTED_AVERAGE,
        description="How individual scores are combined",
    )
    scorer_weights: dict[str, float] = Field(
        default_factory=dict,
        description="Per-scorer weight overrides keyed by scorer id",
    )
    weight: float = Field(
        default=1.0, ge=0.0, description="Weight applied to the aggregate"
    )
    skip_slash_commands: bool = Field(
        default=True, description="Do not score slash-command comments"
    )

    @field_validator("scorer_weights")
    @classmethod
    def _validate_weights(cls, weights: dict[str, float]) -> dict[str, float]:
        negative = [scorer_id for scorer_id, w in weights.items() if w < 0]
        if negative:
            raise ValueError(f"Scorer weights must be >= 0: {', '.join(negative)}")
        return weights
