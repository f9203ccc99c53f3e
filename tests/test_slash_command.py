"""Tests for the slash-command detector module."""

import asyncio

import pytest

from contribution_scoring.domain.models import PipelineResult, SlashCommandConfig
from contribution_scoring.modules.slash_command import SlashCommandDetector


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("/deploy staging", True),
        ("/help", True),
        ("   /assign @octocat", True),
        ("/", True),
        ("see /etc/hosts for details", False),
        ("Looks good to me", False),
    ],
)
def test_is_slash_command(content: str, expected: bool) -> None:
    assert SlashCommandDetector().is_slash_command(content) is expected


def test_leading_whitespace_can_be_significant() -> None:
    detector = SlashCommandDetector(SlashCommandConfig(ignore_leading_whitespace=False))

    assert detector.is_slash_command("  /help") is False
    assert detector.is_slash_command("/help") is True


def test_excluded_commands_are_not_flagged() -> None:
    detector = SlashCommandDetector(SlashCommandConfig(exclude_commands=["lgtm"]))

    assert detector.is_slash_command("/lgtm nice work") is False
    assert detector.is_slash_command("/deploy") is True


def test_transform_sets_flag_and_content(github_comment) -> None:
    event = github_comment("/deploy staging")

    result = asyncio.run(SlashCommandDetector().transform(event, PipelineResult()))

    assert result.is_slash_command is True
    assert result.content == "/deploy staging"


def test_transform_prefers_content_from_earlier_module(github_comment) -> None:
    event = github_comment("/deploy staging")

    result = asyncio.run(
        SlashCommandDetector().transform(
            event, PipelineResult(content="normal sentence")
        )
    )

    assert result.is_slash_command is False


def test_missing_content_records_diagnostic(github_comment) -> None:
    event = github_comment(None)

    result = asyncio.run(SlashCommandDetector().transform(event, PipelineResult()))

    assert result.is_slash_command is None
    assert result.diagnostics == ["content-not-found"]


def test_filtered_result_is_returned_unchanged(github_comment) -> None:
    filtered = PipelineResult(filtered=True, reason="bot-author")

    result = asyncio.run(
        SlashCommandDetector().transform(github_comment("/help"), filtered)
    )

    assert result is filtered
