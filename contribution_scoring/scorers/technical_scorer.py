"""Technical quality scorer.

Combines three sub-metrics with configurable weights:
- Code block quality (indentation, comments, line length, naming)
- Technical term density and variety
- Explanation structure (headings, bullets, paragraphs, examples)
"""

import re
from dataclasses import dataclass
from typing import Final

from contribution_scoring.config.logging_config import get_logger
from contribution_scoring.domain.models import ScorerResult, TechnicalScorerConfig
from contribution_scoring.domain.scoring_constants import (
    BULLET_PATTERN,
    CAMEL_CASE_PATTERN,
    CODE_COMMENT_BONUS,
    CODE_FENCE_LINE_PATTERN,
    CODE_FENCE_PATTERN,
    CODE_INDENTATION_BONUS,
    CODE_LINE_LENGTH_BONUS,
    CODE_NAMING_BONUS,
    COMMENT_MARKER_PATTERN,
    EXAMPLE_PHRASE_PATTERN,
    EXPLANATION_BULLET_BONUS,
    EXPLANATION_EXAMPLE_BONUS,
    EXPLANATION_HEADING_BONUS,
    EXPLANATION_PARAGRAPH_BONUS,
    HEADING_PATTERN,
    INDENTATION_PATTERN,
    MAX_CODE_LINE_LENGTH,
    MAX_PARAGRAPH_LINES,
    MIN_PARAGRAPH_LINES,
    PARAGRAPH_SPLIT_PATTERN,
    TECHNICAL_TERMS,
)
from contribution_scoring.scorers.base import apply_weight, normalize

logger = get_logger(__name__)

WORD_SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\W+")


@dataclass(frozen=True)
class SubMetric:
    """Quality in [0, 1] plus the count it was derived from."""

    quality: float
    count: int


def extract_code_blocks(content: str) -> tuple[list[str], str]:
    """Split fenced code blocks from the surrounding text.

    Example:
        >>> extract_code_blocks("see ```x = 1``` here")
        (['```x = 1```'], 'see  here')
    """
    blocks = CODE_FENCE_PATTERN.findall(content)
    remaining = CODE_FENCE_PATTERN.sub("", content)
    return blocks, remaining


def code_block_quality(block: str) -> float:
    code = CODE_FENCE_LINE_PATTERN.sub("", block).strip()
    quality = 0.0
    if INDENTATION_PATTERN.search(code):
        quality += CODE_INDENTATION_BONUS
    if COMMENT_MARKER_PATTERN.search(code):
        quality += CODE_COMMENT_BONUS
    if all(len(line) <= MAX_CODE_LINE_LENGTH for line in code.split("\n")):
        quality += CODE_LINE_LENGTH_BONUS
    if CAMEL_CASE_PATTERN.search(code):
        quality += CODE_NAMING_BONUS
    return quality


def analyze_code_blocks(blocks: list[str]) -> SubMetric:
    if not blocks:
        return SubMetric(quality=0.0, count=0)
    total = sum(code_block_quality(block) for block in blocks)
    return SubMetric(quality=total / len(blocks), count=len(blocks))


def analyze_technical_terms(text: str) -> SubMetric:
    """Average of term density and vocabulary coverage."""
    words = WORD_SPLIT_PATTERN.split(text.lower())
    matched = [word for word in words if word in TECHNICAL_TERMS]
    density = len(matched) / len(words)
    variety = len(set(matched)) / len(TECHNICAL_TERMS)
    return SubMetric(quality=(density + variety) / 2, count=len(matched))


def analyze_explanation(text: str) -> SubMetric:
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return SubMetric(quality=0.0, count=0)

    quality = 0.0
    if any(HEADING_PATTERN.match(line) for line in lines):
        quality += EXPLANATION_HEADING_BONUS
    if any(BULLET_PATTERN.match(line) for line in lines):
        quality += EXPLANATION_BULLET_BONUS

    paragraphs = PARAGRAPH_SPLIT_PATTERN.split(text)
    good_paragraphs = [
        p
        for p in paragraphs
        if MIN_PARAGRAPH_LINES <= len(p.split("\n")) <= MAX_PARAGRAPH_LINES
    ]
    quality += EXPLANATION_PARAGRAPH_BONUS * (len(good_paragraphs) / len(paragraphs))

    if EXAMPLE_PHRASE_PATTERN.search(text.lower()):
        quality += EXPLANATION_EXAMPLE_BONUS

    return SubMetric(quality=quality, count=len(lines))


class TechnicalScorer:
    """Score content by code, vocabulary and explanation quality."""

    id = "technical"

    def __init__(self, config: TechnicalScorerConfig | None = None) -> None:
        self.config = config or TechnicalScorerConfig()
        self.weight = self.config.weight
        self.weights = self.config.weights

    async def score(self, content: str) -> ScorerResult:
        blocks, remaining_text = extract_code_blocks(content)
        code = analyze_code_blocks(blocks)
        terms = analyze_technical_terms(remaining_text)
        explanation = analyze_explanation(remaining_text)

        code_block_score = normalize(code.quality * 100)
        technical_term_score = normalize(terms.quality * 100)
        explanation_score = normalize(explanation.quality * 100)

        weighted = (
            code_block_score * self.weights.code_block_quality
            + technical_term_score * self.weights.technical_terms
            + explanation_score * self.weights.explanation_quality
        )

        metrics = {
            "code_block_score": code_block_score,
            "technical_term_score": technical_term_score,
            "explanation_score": explanation_score,
            "code_block_count": code.count,
            "technical_term_count": terms.count,
            "explanation_lines": explanation.count,
        }
        logger.debug("technical_scored", weighted=weighted, **metrics)

        return ScorerResult(
            raw_score=weighted * 100,
            normalized_score=apply_weight(weighted, self.weight),
            metrics=metrics,
        )
