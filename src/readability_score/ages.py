from __future__ import annotations

import math
from typing import Iterable

from .errors import DegenerateInputError
from .scoring import round_half_up

# Scores above this (after truncation) map to "college and above".
MAX_GRADE_BEFORE_CAP = 13
CAPPED_UPPER_AGE = 22


def get_lower_age(score: float) -> int:
    return math.trunc(score) + 5


def get_upper_age(score: float) -> int:
    truncated = math.trunc(score)
    if truncated > MAX_GRADE_BEFORE_CAP:
        return CAPPED_UPPER_AGE
    return truncated + 6


def age_bracket(score: float) -> str:
    """Format the reader age range implied by ``score``, e.g. ``"11-12"``."""
    return f"{get_lower_age(score)}-{get_upper_age(score)}"


def average_upper_age(scores: Iterable[float]) -> float:
    """Mean of the upper ages implied by ``scores``, rounded to 2 decimals."""
    ages = [get_upper_age(score) for score in scores]
    if not ages:
        raise DegenerateInputError("no scores to average")
    return round_half_up(sum(ages) / len(ages))
