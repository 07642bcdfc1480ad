from __future__ import annotations

from typing import List, Sequence

from .models import ReadabilityScore, TextStatistics

STATISTICS_TEMPLATE = (
    "Words: {words}\n"
    "Sentences: {sentences}\n"
    "Characters: {characters}\n"
    "Syllables: {syllables}\n"
    "Polysyllables: {polysyllables}"
)
SCORE_TEMPLATE = "{description}: {score:.2f} (about {upper_age}-year-olds)."
AVERAGE_TEMPLATE = "This text should be understood in average by {average:.2f} year olds."


def format_statistics(stats: TextStatistics) -> str:
    return STATISTICS_TEMPLATE.format(**stats.to_dict())


def format_score(result: ReadabilityScore) -> str:
    return SCORE_TEMPLATE.format(
        description=result.algorithm.description,
        score=result.score,
        upper_age=result.upper_age,
    )


def format_average(average: float) -> str:
    return AVERAGE_TEMPLATE.format(average=average)


def format_scores(
    results: Sequence[ReadabilityScore], average: float | None = None
) -> List[str]:
    """Render one line per score, followed by the average line when given."""
    lines = [format_score(result) for result in results]
    if average is not None:
        lines.append(format_average(average))
    return lines
