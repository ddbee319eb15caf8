"""Small string algorithms: character frequencies, de-duplication, filtering."""

from __future__ import annotations

import string
from collections import Counter
from itertools import groupby

_ASCII_LETTERS = frozenset(string.ascii_letters)


def highest_occurring_char(text: str) -> str:
    """Return the character that occurs most often in ``text``.

    Ties are resolved in favour of the character with the lowest code point.
    Raises ``ValueError`` for an empty string.
    """
    if not text:
        raise ValueError("cannot find the most frequent character of an empty string")
    counts = Counter(text)
    return min(counts, key=lambda ch: (-counts[ch], ord(ch)))


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse every run of identical adjacent characters into one."""
    return "".join(ch for ch, _ in groupby(text))


def first_non_repeating_char(text: str) -> str | None:
    """Return the first character that appears exactly once, or ``None``."""
    counts = Counter(text)
    return next((ch for ch in text if counts[ch] == 1), None)


def keep_alphabets(text: str) -> str:
    """Drop every character that is not an ASCII letter."""
    return "".join(ch for ch in text if ch in _ASCII_LETTERS)