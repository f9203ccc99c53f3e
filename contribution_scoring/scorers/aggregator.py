"""Score aggregation across several scorers.

All scorers run concurrently against the same content. A scorer that
raises is logged, recorded in ``failed_scorers`` and contributes a zero
score; the remaining scorers are still aggregated.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.exceptions import ConfigurationError
from contribution_scoring.domain.models import (
    AggregatedScorerResult,
    AggregationStrategy,
    ScorerResult,
    clamp_unit,
)
from contribution_scoring.domain.protocols import Scorer

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScorerEntry:
    """A registered scorer with an optional aggregation weight override."""

    scorer: Scorer
    weight: float | None = None

    @property
    def resolved_weight(self) -> float:
        return self.scorer.weight if self.weight is None else self.weight


@dataclass(frozen=True)
class _ScoredEntry:
    scorer_id: str
    weight: float
    result: ScorerResult
    failed: bool


class ScoreAggregator:
    """Run scorers concurrently and combine their normalized scores."""

    id = "aggregator"

    def __init__(
        self,
        entries: Sequence[ScorerEntry | Scorer],
        strategy: AggregationStrategy = AggregationStrategy.WEIGHTED_AVERAGE,
        weight: float = 1.0,
    ) -> None:
        """Initialize aggregator.

        Args:
            entries: Scorers, optionally wrapped in ``ScorerEntry`` to override weight
            strategy: How to combine individual normalized scores
            weight: Weight applied to the aggregate score

        Raises:
            ConfigurationError: If no scorers are given, scorer ids repeat,
                or a weight is negative
        """
        self.entries = tuple(
            entry if isinstance(entry, ScorerEntry) else ScorerEntry(entry)
            for entry in entries
        )
        self.strategy = AggregationStrategy(strategy)
        self.weight = weight
        self._validate()

    def _validate(self) -> None:
        if not self.entries:
            raise ConfigurationError("Score aggregator needs at least one scorer")

        seen: set[str] = set()
        for entry in self.entries:
            scorer_id = entry.scorer.id
            if scorer_id in seen:
                raise ConfigurationError(f"Duplicate scorer id: {scorer_id}")
            seen.add(scorer_id)
            if entry.resolved_weight < 0:
                raise ConfigurationError(
                    f"Scorer '{scorer_id}' weight must be >= 0, "
                    f"got {entry.resolved_weight}"
                )

        if self.weight < 0:
            raise ConfigurationError(f"Aggregator weight must be >= 0, got {self.weight}")

    @property
    def scorer_ids(self) -> list[str]:
        return [entry.scorer.id for entry in self.entries]

    async def score(self, content: str) -> AggregatedScorerResult:
        """Score ``content`` with every scorer and aggregate the results.

        Args:
            content: Text passed unchanged to every scorer

        Returns:
            Aggregate plus per-scorer results, resolved weights and the ids
            of scorers that raised
        """
        scored = await asyncio.gather(
            *(self._score_entry(entry, content) for entry in self.entries)
        )
        aggregate = self._combine(scored)

        return AggregatedScorerResult(
            raw_score=aggregate * 100,
            normalized_score=clamp_unit(aggregate * self.weight),
            individual_scores={item.scorer_id: item.result for item in scored},
            strategy=self.strategy,
            weights={item.scorer_id: item.weight for item in scored},
            failed_scorers=[item.scorer_id for item in scored if item.failed],
        )

    async def _score_entry(self, entry: ScorerEntry, content: str) -> _ScoredEntry:
        scorer_id = entry.scorer.id
        try:
            result = await entry.scorer.score(content)
        except Exception as e:
            logger.warning(
                "scorer_failed",
                scorer=scorer_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return _ScoredEntry(
                scorer_id=scorer_id,
                weight=entry.resolved_weight,
                result=ScorerResult(
                    raw_score=0.0, normalized_score=0.0, metrics={"error": str(e)}
                ),
                failed=True,
            )
        return _ScoredEntry(
            scorer_id=scorer_id,
            weight=entry.resolved_weight,
            result=result,
            failed=False,
        )

    def _combine(self, scored: Sequence[_ScoredEntry]) -> float:
        normalized = [item.result.normalized_score for item in scored]

        if self.strategy is AggregationStrategy.MINIMUM:
            return min(normalized)
        if self.strategy is AggregationStrategy.MAXIMUM:
            return max(normalized)

        total_weight = sum(item.weight for item in scored)
        if total_weight <= 0:
            logger.warning(
                "aggregator_zero_total_weight",
                scorers=[item.scorer_id for item in scored],
            )
            return 0.0
        weighted_sum = sum(
            item.result.normalized_score * item.weight for item in scored
        )
        return weighted_sum / total_weight
