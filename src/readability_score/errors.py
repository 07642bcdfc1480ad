from __future__ import annotations


class ReadabilityError(ValueError):
    """Base class for errors raised by the readability engine."""


class InvalidInputError(ReadabilityError):
    """Raised when the input text is empty or whitespace only."""


class UnknownAlgorithmError(ReadabilityError):
    """Raised when a score choice does not name a known algorithm."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown algorithm '{name}'.")
        self.name = name


class DegenerateInputError(ReadabilityError):
    """Raised when a formula would divide by a zero count."""
