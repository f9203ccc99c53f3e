"""Tests for readability statistics."""

import pytest

from contribution_scoring.services import readability


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("the", 1),
        ("cat", 1),
        ("table", 2),
        ("makes", 1),
        ("does", 1),
        ("doing", 2),
        ("readability", 5),
        ("", 0),
    ],
)
def test_count_word_syllables(word: str, expected: int) -> None:
    assert readability.count_word_syllables(word) == expected


def test_counts_words_and_sentences() -> None:
    text = "Hello world. How are you? Fine!"

    assert readability.lexicon_count(text) == 6
    assert readability.sentence_count(text) == 3
    assert readability.words_per_sentence(text) == pytest.approx(2.0)


def test_flesch_reading_ease_of_simple_sentence() -> None:
    # 6 words, 1 sentence, 6 syllables
    assert readability.flesch_reading_ease("The cat sat on the mat.") == pytest.approx(
        206.835 - 1.015 * 6 - 84.6
    )


def test_simple_text_is_easier_than_dense_text() -> None:
    simple = "We fixed the bug. The test is green. Ship it now."
    dense = (
        "Comprehensive internationalization considerations necessitate "
        "substantial architectural reorganization of configuration management."
    )

    assert readability.flesch_reading_ease(simple) > readability.flesch_reading_ease(
        dense
    )
    assert readability.flesch_kincaid_grade(simple) < readability.flesch_kincaid_grade(
        dense
    )


def test_empty_text_does_not_divide_by_zero() -> None:
    assert readability.flesch_reading_ease("") == pytest.approx(206.835)
    assert readability.sentence_count("") == 0
    assert readability.gunning_fog("") == 0.0
    assert readability.coleman_liau("") < 0
    assert readability.smog_index("") == pytest.approx(3.1291)
    assert readability.automated_readability_index("") == pytest.approx(0.5 - 21.43)


def test_complex_words_need_three_syllables() -> None:
    assert readability.complex_word_count("readability is a big deal") == 1
