"""Tests for the bot detector module."""

import asyncio

from contribution_scoring.domain.models import BotDetectorConfig, PipelineResult
from contribution_scoring.modules.bot_detector import BotDetector


def test_github_app_suffix_is_bot(github_comment) -> None:
    event = github_comment("Bumps lodash from 4.17.20 to 4.17.21", "dependabot[bot]")

    result = asyncio.run(BotDetector().transform(event, PipelineResult()))

    assert result.is_bot is True
    assert result.author == "dependabot[bot]"


def test_human_author_is_not_bot(github_comment) -> None:
    event = github_comment("Thanks, merging this now", "octocat")

    result = asyncio.run(BotDetector().transform(event, PipelineResult()))

    assert result.is_bot is False
    assert result.author == "octocat"


def test_known_automation_name_is_bot(github_comment) -> None:
    event = github_comment("Update dependency pytest to v8", "Renovate")

    result = asyncio.run(BotDetector().transform(event, PipelineResult()))

    assert result.is_bot is True


def test_platform_flag_marks_bot_unless_disabled(github_comment) -> None:
    event = github_comment("Build finished", "release-app", user_type="Bot")

    flagged = asyncio.run(BotDetector().transform(event, PipelineResult()))
    ignored = asyncio.run(
        BotDetector(BotDetectorConfig(check_platform_bot_flag=False)).transform(
            event, PipelineResult()
        )
    )

    assert flagged.is_bot is True
    assert ignored.is_bot is False


def test_allow_list_overrides_name_match(github_comment) -> None:
    event = github_comment("I reviewed the renovate config", "renovate-fan")
    detector = BotDetector(BotDetectorConfig(allow_list=["Renovate-Fan"]))

    result = asyncio.run(detector.transform(event, PipelineResult()))

    assert result.is_bot is False


def test_missing_author_records_diagnostic(github_comment) -> None:
    """No author means unknown, not human."""
    event = github_comment("Anonymous text", login=None)

    result = asyncio.run(BotDetector().transform(event, PipelineResult()))

    assert result.is_bot is None
    assert result.diagnostics == ["author-not-found"]


def test_filtered_result_is_returned_unchanged(github_comment) -> None:
    event = github_comment("text", "dependabot[bot]")
    filtered = PipelineResult(filtered=True, reason="too-short")

    result = asyncio.run(BotDetector().transform(event, filtered))

    assert result is filtered


def test_author_from_earlier_module_is_reused(github_comment) -> None:
    event = github_comment("text", login=None)

    result = asyncio.run(
        BotDetector().transform(event, PipelineResult(author="build-bot[bot]"))
    )

    assert result.is_bot is True


def test_can_process_platform_events_only(make_event) -> None:
    detector = BotDetector()

    assert detector.can_process(make_event("com.github.issues.opened"))
    assert detector.can_process(make_event("com.telegram.message.sent"))
    assert not detector.can_process(make_event("com.example.note.created"))


def test_human_comment_on_bot_opened_issue_is_not_bot(make_event) -> None:
    event = make_event(
        "com.github.issue_comment.created",
        {
            "comment": {
                "body": "Can we pin this version instead?",
                "user": {"login": "octocat", "type": "User"},
            },
            "issue": {"user": {"login": "dependabot[bot]", "type": "Bot"}},
        },
    )

    result = asyncio.run(BotDetector().transform(event, PipelineResult()))

    assert result.is_bot is False
    assert result.author == "octocat"
