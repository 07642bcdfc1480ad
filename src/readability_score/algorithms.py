from __future__ import annotations

from enum import Enum
from typing import List

from .errors import UnknownAlgorithmError

ALL_CHOICE = "all"


class Algorithm(Enum):
    """Supported readability formulas, each with its display name."""

    ARI = "Automated Readability Index"
    FK = "Flesch–Kincaid readability tests"
    SMOG = "Simple Measure of Gobbledygook"
    CL = "Coleman-Liau index"

    @property
    def description(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """Look up an algorithm by its short name, ignoring case."""
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            raise UnknownAlgorithmError(name) from None


def resolve_algorithms(choice: str | Algorithm) -> List[Algorithm]:
    """
    Expand a user score choice into the algorithms to compute.
    "all" selects every algorithm in declaration order.
    """
    if isinstance(choice, Algorithm):
        return [choice]
    if choice.strip().lower() == ALL_CHOICE:
        return list(Algorithm)
    return [Algorithm.from_name(choice)]


def is_all_choice(choice: str | Algorithm) -> bool:
    return isinstance(choice, str) and choice.strip().lower() == ALL_CHOICE
