from __future__ import annotations

from dataclasses import dataclass

from .algorithms import Algorithm
from .errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class Document:
    """Represents the input text. Blank text is rejected on construction."""

    text: str
    doc_id: str = "<text>"

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise InvalidInputError("Text cannot be null or empty")


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """The five count primitives derived from a document."""

    words: int
    sentences: int
    characters: int
    syllables: int
    polysyllables: int

    def to_dict(self) -> dict[str, int]:
        return {
            "words": self.words,
            "sentences": self.sentences,
            "characters": self.characters,
            "syllables": self.syllables,
            "polysyllables": self.polysyllables,
        }


@dataclass(frozen=True, slots=True)
class ReadabilityScore:
    """Score for one algorithm together with the implied reader ages."""

    algorithm: Algorithm
    score: float
    lower_age: int
    upper_age: int

    @property
    def age_bracket(self) -> str:
        return f"{self.lower_age}-{self.upper_age}"
