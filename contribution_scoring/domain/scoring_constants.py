"""Scoring constants, thresholds and vocabularies.

Weights and thresholds can be overridden per deployment through the
configuration models in ``domain.models``; the values here are the
defaults and the fixed business rules.
"""

import re
from typing import Final

# Bot detection
BOT_NAME_SUFFIX: Final[str] = "[bot]"
"""Literal suffix GitHub appends to app/bot account logins."""

DEFAULT_AUTOMATION_NAMES: Final[tuple[str, ...]] = (
    "dependabot",
    "renovate",
    "github-actions",
)
"""Well-known automation accounts matched case-insensitively by substring."""

DEFAULT_FILTER_BOT_MARKERS: Final[tuple[str, ...]] = ("bot",)
"""Name markers the content filter treats as bots when no detector ran.

Business rule: any login containing "bot" is excluded from scoring. This
is deliberately broader than the detector's automation list.
"""

# Content filter
DEFAULT_MIN_CONTENT_LENGTH: Final[int] = 10
"""Content shorter than this many characters is not worth scoring."""

# Readability
DEFAULT_READABILITY_TARGET: Final[float] = 60.0
"""Flesch reading ease considered ideal (plain English, 8th-9th grade)."""

READABILITY_DISTANCE_SPAN: Final[float] = 100.0
"""Distance from the target at which the readability score reaches 0."""

# Technical scorer sub-metric weights (not renormalized)
DEFAULT_CODE_BLOCK_WEIGHT: Final[float] = 0.4
DEFAULT_TECHNICAL_TERMS_WEIGHT: Final[float] = 0.3
DEFAULT_EXPLANATION_WEIGHT: Final[float] = 0.3

# Code block quality increments
CODE_INDENTATION_BONUS: Final[float] = 0.3
CODE_COMMENT_BONUS: Final[float] = 0.2
CODE_LINE_LENGTH_BONUS: Final[float] = 0.2
CODE_NAMING_BONUS: Final[float] = 0.3
MAX_CODE_LINE_LENGTH: Final[int] = 80

# Explanation quality increments
EXPLANATION_HEADING_BONUS: Final[float] = 0.2
EXPLANATION_BULLET_BONUS: Final[float] = 0.2
EXPLANATION_PARAGRAPH_BONUS: Final[float] = 0.3
EXPLANATION_EXAMPLE_BONUS: Final[float] = 0.3
MIN_PARAGRAPH_LINES: Final[int] = 3
MAX_PARAGRAPH_LINES: Final[int] = 10

TECHNICAL_TERMS: Final[frozenset[str]] = frozenset(
    {
        "api",
        "async",
        "await",
        "function",
        "class",
        "interface",
        "type",
        "const",
        "let",
        "var",
        "import",
        "export",
        "return",
        "promise",
        "callback",
        "parameter",
        "argument",
        "method",
        "property",
        "object",
        "array",
        "string",
        "number",
        "boolean",
        "null",
        "undefined",
        "try",
        "catch",
        "throw",
        "error",
    }
)
"""Vocabulary for technical-term density (30 terms)."""

CODE_FENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r"```[\s\S]*?```")
CODE_FENCE_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"```.*\n?")
INDENTATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[ ]{2,}|\t", re.MULTILINE)
COMMENT_MARKER_PATTERN: Final[re.Pattern[str]] = re.compile(r"//|/\*|\*|#")
CAMEL_CASE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-z][A-Z][a-z]")
HEADING_PATTERN: Final[re.Pattern[str]] = re.compile(r"^#{2,}\s+\w+")
BULLET_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[-*]\s+\w+")
PARAGRAPH_SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"\n\s*\n")
EXAMPLE_PHRASE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"for example|e\.g\.|i\.e\.|such as"
)
