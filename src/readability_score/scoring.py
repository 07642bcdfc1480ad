from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from .algorithms import Algorithm
from .errors import DegenerateInputError
from .models import TextStatistics

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 2) -> float:
    """
    Round to ``places`` decimals with ties away from zero.

    The float's shortest repr is rounded rather than its binary value, so
    2.675 becomes 2.68 (the built-in ``round`` gives 2.67).
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    # -0.004 rounds to -0.0; report it as 0.0
    return rounded if rounded != 0 else 0.0


def clamp_non_negative(value: float) -> float:
    return max(0.0, value)


def _require_words(stats: TextStatistics) -> None:
    if stats.words == 0:
        raise DegenerateInputError("text has no words")


def _require_sentences(stats: TextStatistics) -> None:
    if stats.sentences == 0:
        raise DegenerateInputError("text has no sentences")


def automated_readability_index(stats: TextStatistics) -> float:
    _require_words(stats)
    _require_sentences(stats)
    raw = (
        4.71 * stats.characters / stats.words
        + 0.5 * stats.words / stats.sentences
        - 21.43
    )
    return clamp_non_negative(round_half_up(raw))


def flesch_kincaid(stats: TextStatistics) -> float:
    _require_words(stats)
    _require_sentences(stats)
    raw = (
        0.39 * stats.words / stats.sentences
        + 11.8 * stats.syllables / stats.words
        - 15.59
    )
    return clamp_non_negative(round_half_up(raw))


def smog(stats: TextStatistics) -> float:
    _require_sentences(stats)
    raw = 1.043 * math.sqrt(stats.polysyllables * 30.0 / stats.sentences) + 3.1291
    return round_half_up(raw)


def coleman_liau(stats: TextStatistics) -> float:
    _require_words(stats)
    chars_per_100_words = stats.characters * 100.0 / stats.words
    sentences_per_100_words = stats.sentences * 100.0 / stats.words
    raw = 0.0588 * chars_per_100_words - 0.296 * sentences_per_100_words - 15.8
    return round_half_up(raw)


SCORERS = {
    Algorithm.ARI: automated_readability_index,
    Algorithm.FK: flesch_kincaid,
    Algorithm.SMOG: smog,
    Algorithm.CL: coleman_liau,
}


def score_for(stats: TextStatistics, algorithm: Algorithm) -> float:
    """Compute the rounded (and, for ARI/FK, clamped) score for ``algorithm``."""
    score = SCORERS[algorithm](stats)
    logger.debug("Computed %s score %.2f", algorithm.name, score)
    return score


def score_all(
    stats: TextStatistics, algorithms: Iterable[Algorithm] | None = None
) -> List[float]:
    """Score every requested algorithm (all of them by default) in order."""
    selected = list(Algorithm) if algorithms is None else list(algorithms)
    return [score_for(stats, algorithm) for algorithm in selected]
