"""Readability statistics for English text.

Handles:
- Sentence, word (lexicon) and syllable counting
- Flesch reading ease and Flesch-Kincaid grade
- Gunning fog, Coleman-Liau, SMOG and automated readability indices

Counts are heuristic: syllables are estimated from vowel groups after
trimming silent endings, sentences are split on terminal punctuation.
"""

import math
import re
from typing import Final

WORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"\b\w+\b")
SENTENCE_SPLIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[.!?]+")
LETTER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z]")
SILENT_ENDING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?:[^laeiouy]es|ed|[^laeiouy]e)$"
)
LEADING_Y_PATTERN: Final[re.Pattern[str]] = re.compile(r"^y")
VOWEL_GROUP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[aeiouy]{1,2}")

SYLLABLE_EXCEPTIONS: Final[dict[str, int]] = {"does": 1, "doing": 2}
COMPLEX_WORD_MIN_SYLLABLES: Final[int] = 3


def count_word_syllables(word: str) -> int:
    """Estimate the syllables of a single word.

    Example:
        >>> count_word_syllables("readability")
        5
        >>> count_word_syllables("the")
        1
    """
    word = word.lower().strip()
    if not word:
        return 0
    if len(word) <= 3:
        return 1
    if word in SYLLABLE_EXCEPTIONS:
        return SYLLABLE_EXCEPTIONS[word]

    word = SILENT_ENDING_PATTERN.sub("", word)
    word = LEADING_Y_PATTERN.sub("", word)
    groups = VOWEL_GROUP_PATTERN.findall(word)
    return len(groups) if groups else 1


def syllable_count(text: str) -> int:
    return sum(count_word_syllables(word) for word in text.lower().split())


def lexicon_count(text: str) -> int:
    return len(WORD_PATTERN.findall(text))


def sentence_count(text: str) -> int:
    return sum(1 for part in SENTENCE_SPLIT_PATTERN.split(text) if part.strip())


def words_per_sentence(text: str) -> float:
    return lexicon_count(text) / max(1, sentence_count(text))


def complex_word_count(text: str) -> int:
    words = WORD_PATTERN.findall(text.lower())
    return sum(
        1 for word in words if count_word_syllables(word) >= COMPLEX_WORD_MIN_SYLLABLES
    )


def flesch_reading_ease(text: str) -> float:
    """Flesch reading ease: higher is easier, 60-70 is plain English.

    Example:
        >>> flesch_reading_ease("The cat sat on the mat.") > 100
        True
    """
    words = lexicon_count(text)
    sentences = max(1, sentence_count(text))
    syllables = syllable_count(text)
    return (
        206.835
        - 1.015 * (words / sentences)
        - 84.6 * (syllables / max(1, words))
    )


def flesch_kincaid_grade(text: str) -> float:
    words = lexicon_count(text)
    sentences = max(1, sentence_count(text))
    syllables = syllable_count(text)
    return 0.39 * (words / sentences) + 11.8 * (syllables / max(1, words)) - 15.59


def gunning_fog(text: str) -> float:
    words = max(1, lexicon_count(text))
    sentences = max(1, sentence_count(text))
    percent_complex = complex_word_count(text) / words * 100
    return 0.4 * (lexicon_count(text) / sentences + percent_complex)


def coleman_liau(text: str) -> float:
    words = max(1, lexicon_count(text))
    letters = len(LETTER_PATTERN.findall(text))
    letters_per_100 = letters / words * 100
    sentences_per_100 = max(1, sentence_count(text)) / words * 100
    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8


def smog_index(text: str) -> float:
    sentences = max(1, sentence_count(text))
    return 1.043 * math.sqrt(complex_word_count(text) * 30 / sentences) + 3.1291


def automated_readability_index(text: str) -> float:
    words = max(1, lexicon_count(text))
    sentences = max(1, sentence_count(text))
    return 4.71 * (len(text) / words) + 0.5 * (words / sentences) - 21.43
