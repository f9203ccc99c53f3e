"""Scorer exports."""

from contribution_scoring.scorers.aggregator import ScoreAggregator, ScorerEntry
from contribution_scoring.scorers.readability_scorer import ReadabilityScorer
from contribution_scoring.scorers.technical_scorer import TechnicalScorer

__all__ = [
    "ReadabilityScorer",
    "ScoreAggregator",
    "ScorerEntry",
    "TechnicalScorer",
]
