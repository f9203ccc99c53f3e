"""Pipeline module exports."""

from contribution_scoring.modules.bot_detector import BotDetector
from contribution_scoring.modules.content_filter import ContentFilter
from contribution_scoring.modules.scoring_pipeline import ScoringPipeline
from contribution_scoring.modules.slash_command import SlashCommandDetector

__all__ = [
    "BotDetector",
    "ContentFilter",
    "ScoringPipeline",
    "SlashCommandDetector",
]
