"""Tests for the scoring pipeline module."""

import asyncio

import pytest

from contribution_scoring.domain.models import PipelineResult, ScorerResult
from contribution_scoring.modules.scoring_pipeline import ScoringPipeline
from contribution_scoring.scorers.aggregator import ScoreAggregator, ScorerEntry


class StaticScorer:
    def __init__(self, scorer_id: str, normalized: float) -> None:
        self.id = scorer_id
        self.weight = 1.0
        self.normalized = normalized
        self.calls = 0

    async def score(self, content: str) -> ScorerResult:
        self.calls += 1
        return ScorerResult(
            raw_score=self.normalized * 100, normalized_score=self.normalized
        )


@pytest.fixture
def scorers() -> tuple[StaticScorer, StaticScorer]:
    return StaticScorer("readability", 0.9), StaticScorer("technical", 0.45)


@pytest.fixture
def pipeline(scorers: tuple[StaticScorer, StaticScorer]) -> ScoringPipeline:
    readability, technical = scorers
    aggregator = ScoreAggregator(
        [ScorerEntry(readability, 0.6), ScorerEntry(technical, 0.4)]
    )
    return ScoringPipeline(aggregator)


def test_scores_unfiltered_content(pipeline: ScoringPipeline, github_comment) -> None:
    event = github_comment("A thoughtful review comment")

    result = asyncio.run(
        pipeline.transform(event, PipelineResult(filtered=False, is_bot=False))
    )

    assert result.scores == {"readability": 0.9, "technical": 0.45}
    assert result.score is not None
    assert result.score.normalized_score == pytest.approx(0.72)
    assert result.filtered is False


def test_prefers_content_from_earlier_module(
    pipeline: ScoringPipeline, github_comment
) -> None:
    event = github_comment(None)

    result = asyncio.run(pipeline.transform(event, PipelineResult(content="text")))

    assert result.score is not None


@pytest.mark.parametrize(
    "upstream",
    [
        PipelineResult(filtered=True, reason="too-short"),
        PipelineResult(is_bot=True),
        PipelineResult(is_slash_command=True),
    ],
)
def test_skips_filtered_bot_and_command_content(
    pipeline: ScoringPipeline,
    scorers: tuple[StaticScorer, StaticScorer],
    github_comment,
    upstream: PipelineResult,
) -> None:
    event = github_comment("Some content that would otherwise be scored")

    result = asyncio.run(pipeline.transform(event, upstream))

    assert result is upstream
    assert all(scorer.calls == 0 for scorer in scorers)


def test_slash_commands_scored_when_skip_disabled(
    scorers: tuple[StaticScorer, StaticScorer], github_comment
) -> None:
    pipeline = ScoringPipeline(ScoreAggregator(list(scorers)), skip_slash_commands=False)

    result = asyncio.run(
        pipeline.transform(
            github_comment("/deploy staging"), PipelineResult(is_slash_command=True)
        )
    )

    assert result.score is not None


def test_missing_content_records_diagnostic(
    pipeline: ScoringPipeline, github_comment
) -> None:
    result = asyncio.run(pipeline.transform(github_comment(None), PipelineResult()))

    assert result.score is None
    assert result.diagnostics == ["no-scorable-content"]


def test_processes_any_event_type_by_default(
    pipeline: ScoringPipeline, make_event
) -> None:
    assert pipeline.can_process(make_event("com.example.note.created"))
