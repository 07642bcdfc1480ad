"""
readability_score computes ARI, Flesch–Kincaid, SMOG and Coleman-Liau scores
for a text and maps them to reader age brackets.
"""

from __future__ import annotations

from .algorithms import Algorithm, resolve_algorithms
from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .engine import TextMetrics
from .errors import (
    DegenerateInputError,
    InvalidInputError,
    ReadabilityError,
    UnknownAlgorithmError,
)
from .models import Document, ReadabilityScore, TextStatistics

__all__ = [
    "Algorithm",
    "resolve_algorithms",
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "TextMetrics",
    "Document",
    "ReadabilityScore",
    "TextStatistics",
    "ReadabilityError",
    "InvalidInputError",
    "UnknownAlgorithmError",
    "DegenerateInputError",
]

__version__ = "0.1.0"
