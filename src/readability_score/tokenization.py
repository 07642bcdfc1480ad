from __future__ import annotations

import re
from typing import Iterator

CHAR_PATTERN = re.compile(r"\S", re.ASCII)
WORD_PATTERN = re.compile(r"\S+", re.ASCII)
SENTENCE_PATTERN = re.compile(r"[^.?!]+", re.ASCII)
# A vowel followed by a consonant (or digit/underscore), or a non-"e" vowel
# ending the word. Trailing "e" is treated as silent.
SYLLABLE_PATTERN = re.compile(
    r"[aeiouy](?=[^aeiouy\W])|[aiouy](?=\b)", re.ASCII | re.IGNORECASE
)


def _count_matches(pattern: re.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def iter_words(text: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens, punctuation included."""
    for match in WORD_PATTERN.finditer(text):
        yield match.group()


def chars_count(text: str) -> int:
    """Count non-whitespace characters."""
    return _count_matches(CHAR_PATTERN, text)


def word_count(text: str) -> int:
    return _count_matches(WORD_PATTERN, text)


def sentence_count(text: str) -> int:
    """
    Count maximal runs of characters that are not sentence terminators.
    Repeated terminators ("?!", "...") never yield empty sentences, but
    whitespace following the last terminator is a run of its own.
    """
    return _count_matches(SENTENCE_PATTERN, text)


def syllables_per_word(word: str) -> int:
    """Approximate the syllables in a token; every token has at least one."""
    return _count_matches(SYLLABLE_PATTERN, word) or 1


def syllables_count(text: str) -> int:
    return sum(syllables_per_word(word) for word in iter_words(text))


def polysyllables_count(text: str) -> int:
    """Count tokens with more than two syllables."""
    return sum(1 for word in iter_words(text) if syllables_per_word(word) > 2)
