"""Readability scorer based on Flesch reading ease.

The score peaks when the text's reading ease equals the configured
target and decays linearly with the distance from it, reaching zero
100 points away.
"""

from typing import Any

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.models import (
    ReadabilityScorerConfig,
    ScorerResult,
    clamp_unit,
)
from contribution_scoring.domain.scoring_constants import READABILITY_DISTANCE_SPAN
from contribution_scoring.scorers.base import apply_weight
from contribution_scoring.services import readability

logger = get_logger(__name__)


class ReadabilityScorer:
    """Score content by closeness of its reading ease to a target."""

    id = "readability"

    def __init__(self, config: ReadabilityScorerConfig | None = None) -> None:
        self.config = config or ReadabilityScorerConfig()
        self.weight = self.config.weight

    def distance_score(self, reading_ease: float) -> float:
        """Pre-weight score for a reading ease value.

        Example:
            >>> ReadabilityScorer().distance_score(60.0)
            1.0
            >>> ReadabilityScorer().distance_score(10.0)
            0.5
        """
        distance = abs(reading_ease - self.config.target_score)
        return clamp_unit(1.0 - distance / READABILITY_DISTANCE_SPAN)

    async def score(self, content: str) -> ScorerResult:
        reading_ease = readability.flesch_reading_ease(content)
        normalized = self.distance_score(reading_ease)

        metrics: dict[str, Any] = {"flesch_reading_ease": reading_ease}
        if self.config.include_all_metrics:
            metrics.update(self._extended_metrics(content))

        logger.debug(
            "readability_scored",
            reading_ease=reading_ease,
            normalized=normalized,
            target=self.config.target_score,
        )

        return ScorerResult(
            raw_score=reading_ease,
            normalized_score=apply_weight(normalized, self.weight),
            metrics=metrics,
        )

    @staticmethod
    def _extended_metrics(content: str) -> dict[str, Any]:
        words = readability.lexicon_count(content)
        syllables = readability.syllable_count(content)
        return {
            "flesch_kincaid_grade": readability.flesch_kincaid_grade(content),
            "gunning_fog_index": readability.gunning_fog(content),
            "coleman_liau_index": readability.coleman_liau(content),
            "smog_index": readability.smog_index(content),
            "automated_readability_index": readability.automated_readability_index(
                content
            ),
            "text_stats": {
                "sentences": readability.sentence_count(content),
                "words": words,
                "syllables": syllables,
                "words_per_sentence": readability.words_per_sentence(content),
                "syllables_per_word": syllables / max(1, words),
            },
        }
