from __future__ import annotations

import logging
from typing import Any, Dict, List

from . import tokenization
from .ages import age_bracket, average_upper_age, get_lower_age, get_upper_age
from .algorithms import Algorithm, is_all_choice, resolve_algorithms
from .models import Document, ReadabilityScore, TextStatistics
from .report import format_score, format_scores, format_statistics
from .scoring import score_for

logger = logging.getLogger(__name__)


class TextMetrics:
    """
    Readability statistics and scores for a single immutable document.

    Counts are computed once on first use and reused by every score.
    Algorithms may be given either as ``Algorithm`` members or by their
    short names ("ARI", "fk", ...).
    """

    def __init__(self, text: str | Document) -> None:
        self._document = text if isinstance(text, Document) else Document(text)
        self._statistics: TextStatistics | None = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def text(self) -> str:
        return self._document.text

    def chars_count(self) -> int:
        return self.statistics().characters

    def word_count(self) -> int:
        return self.statistics().words

    def sentence_count(self) -> int:
        return self.statistics().sentences

    def syllables_count(self) -> int:
        return self.statistics().syllables

    def polysyllables_count(self) -> int:
        return self.statistics().polysyllables

    def statistics(self) -> TextStatistics:
        if self._statistics is None:
            text = self._document.text
            self._statistics = TextStatistics(
                words=tokenization.word_count(text),
                sentences=tokenization.sentence_count(text),
                characters=tokenization.chars_count(text),
                syllables=tokenization.syllables_count(text),
                polysyllables=tokenization.polysyllables_count(text),
            )
            logger.debug(
                "Statistics for %s: %s", self._document.doc_id, self._statistics
            )
        return self._statistics

    def score_for(self, algorithm: Algorithm | str) -> float:
        return score_for(self.statistics(), _as_algorithm(algorithm))

    def age_bracket_for(self, score: float) -> str:
        return age_bracket(score)

    def result_for(self, algorithm: Algorithm | str) -> ReadabilityScore:
        selected = _as_algorithm(algorithm)
        score = self.score_for(selected)
        return ReadabilityScore(
            algorithm=selected,
            score=score,
            lower_age=get_lower_age(score),
            upper_age=get_upper_age(score),
        )

    def scores(self, choice: Algorithm | str = "all") -> List[ReadabilityScore]:
        """Score every algorithm selected by ``choice`` ("all" or a name)."""
        return [self.result_for(algorithm) for algorithm in resolve_algorithms(choice)]

    def average_upper_age(self, choice: Algorithm | str = "all") -> float:
        return average_upper_age(result.score for result in self.scores(choice))

    def formatted_statistics(self) -> str:
        return format_statistics(self.statistics())

    def formatted_score(self, algorithm: Algorithm | str) -> str:
        return format_score(self.result_for(algorithm))

    def formatted_scores(self, choice: Algorithm | str) -> List[str]:
        """Score lines for ``choice``; the "all" choice adds the average age line."""
        results = self.scores(choice)
        average = None
        if is_all_choice(choice):
            average = average_upper_age(result.score for result in results)
        return format_scores(results, average)

    def to_dict(self, choice: Algorithm | str = "all") -> Dict[str, Any]:
        """JSON-serializable summary of the statistics and selected scores."""
        results = self.scores(choice)
        payload: Dict[str, Any] = {
            "doc_id": self._document.doc_id,
            "statistics": self.statistics().to_dict(),
            "scores": [
                {
                    "algorithm": result.algorithm.name,
                    "description": result.algorithm.description,
                    "score": result.score,
                    "age_bracket": result.age_bracket,
                    "upper_age": result.upper_age,
                }
                for result in results
            ],
        }
        if is_all_choice(choice):
            payload["average_upper_age"] = average_upper_age(
                result.score for result in results
            )
        return payload


def _as_algorithm(algorithm: Algorithm | str) -> Algorithm:
    if isinstance(algorithm, Algorithm):
        return algorithm
    return Algorithm.from_name(algorithm)
