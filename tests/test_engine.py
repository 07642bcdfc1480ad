import pytest

from readability_score.algorithms import Algorithm
from readability_score.engine import TextMetrics
from readability_score.errors import (
    DegenerateInputError,
    InvalidInputError,
    UnknownAlgorithmError,
)
from readability_score.models import Document

SIMPLE_TEXT = "The cat sat on the mat. It was happy!"
COMPLEX_TEXT = (
    "Readability metrics estimate comprehension difficulty. "
    "Complicated vocabulary increases scores."
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_blank_text_is_rejected(text: str):
    with pytest.raises(InvalidInputError):
        TextMetrics(text)


def test_document_is_immutable():
    doc = Document("Some text.")
    with pytest.raises(AttributeError):
        doc.text = "Other text."  # type: ignore[misc]


def test_counts_for_simple_text():
    metrics = TextMetrics(SIMPLE_TEXT)

    assert metrics.word_count() == 9
    assert metrics.sentence_count() == 2
    assert metrics.chars_count() == 29
    assert metrics.syllables_count() == 10
    assert metrics.polysyllables_count() == 0


def test_scores_for_complex_text():
    metrics = TextMetrics(COMPLEX_TEXT)

    assert metrics.word_count() == 9
    assert metrics.chars_count() == 87
    assert metrics.syllables_count() == 32
    assert metrics.polysyllables_count() == 7
    assert metrics.score_for(Algorithm.ARI) == 26.35
    assert metrics.score_for("fk") == 28.12
    assert metrics.score_for("SMOG") == 13.82
    assert metrics.score_for(Algorithm.CL) == 34.46
    assert metrics.average_upper_age() == 21.25


def test_scores_are_clamped_for_simple_text():
    metrics = TextMetrics(SIMPLE_TEXT)

    assert metrics.score_for("ARI") == 0.0
    assert metrics.score_for("FK") == 0.0
    assert metrics.score_for("SMOG") == 3.13
    assert metrics.score_for("CL") == -3.43


def test_result_for_carries_age_bracket():
    result = TextMetrics(COMPLEX_TEXT).result_for("SMOG")

    assert result.algorithm is Algorithm.SMOG
    assert result.lower_age == 18
    assert result.upper_age == 19
    assert result.age_bracket == "18-19"


def test_age_bracket_for():
    metrics = TextMetrics(SIMPLE_TEXT)
    assert metrics.age_bracket_for(13.99) == "18-19"
    assert metrics.age_bracket_for(14.0) == "19-22"


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        TextMetrics(SIMPLE_TEXT).score_for("xyz")


def test_terminators_only_text_is_degenerate():
    metrics = TextMetrics("...")

    assert metrics.sentence_count() == 0
    with pytest.raises(DegenerateInputError, match="no sentences"):
        metrics.score_for("ARI")


def test_formatted_statistics():
    assert TextMetrics("The Fox.").formatted_statistics() == (
        "Words: 2\nSentences: 1\nCharacters: 7\nSyllables: 2\nPolysyllables: 0"
    )


def test_formatted_score_and_all_scores():
    metrics = TextMetrics(SIMPLE_TEXT)

    assert metrics.formatted_score("CL") == "Coleman-Liau index: -3.43 (about 3-year-olds)."
    assert metrics.formatted_scores("all") == [
        "Automated Readability Index: 0.00 (about 6-year-olds).",
        "Flesch–Kincaid readability tests: 0.00 (about 6-year-olds).",
        "Simple Measure of Gobbledygook: 3.13 (about 9-year-olds).",
        "Coleman-Liau index: -3.43 (about 3-year-olds).",
        "This text should be understood in average by 6.00 year olds.",
    ]
    assert metrics.formatted_scores("ari") == [
        "Automated Readability Index: 0.00 (about 6-year-olds)."
    ]


def test_to_dict_includes_average_only_for_all():
    metrics = TextMetrics(Document(COMPLEX_TEXT, doc_id="sample.txt"))

    payload = metrics.to_dict("all")
    assert payload["doc_id"] == "sample.txt"
    assert payload["statistics"]["sentences"] == 2
    assert [entry["algorithm"] for entry in payload["scores"]] == [
        "ARI",
        "FK",
        "SMOG",
        "CL",
    ]
    assert payload["scores"][2]["age_bracket"] == "18-19"
    assert payload["average_upper_age"] == 21.25

    single = metrics.to_dict("cl")
    assert "average_upper_age" not in single
    assert single["scores"][0]["score"] == 34.46


def test_statistics_are_computed_once():
    metrics = TextMetrics(SIMPLE_TEXT)
    assert metrics.statistics() is metrics.statistics()
