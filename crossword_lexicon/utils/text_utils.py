"""
Word normalization utilities for the master dictionary build.

Source word lists contain personal names, brands and short phrases ("O'Hare",
"Big Mac", "e.e. cummings"). These helpers collapse such surface variants into
a canonical uppercase A-Z form and decide whether the result is admissible.
Case mapping is ASCII-only so results never depend on the process locale.
"""

import re
from typing import Optional

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_LENGTH = 5

# Whitespace, hyphen, ASCII apostrophe, right single quote (U+2019) and period
SEPARATOR_RE = re.compile(r"[\s\-'’.]")

VALID_WORD_RE = re.compile(r"[A-Z]+")

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def strip_separators(text: str) -> str:
    """Remove every separator character (spaces, hyphens, apostrophes, periods)."""
    return SEPARATOR_RE.sub("", text)


def ascii_upper(text: str) -> str:
    """
    Uppercase ASCII letters only.

    Non-ASCII letters are left untouched so that they fail the A-Z check
    instead of being folded into something admissible (str.upper() maps
    "ß" to "SS", for example).
    """
    return text.translate(_ASCII_UPPER)


def is_admissible(
    word: str, min_length: int = DEFAULT_MIN_LENGTH, max_length: int = DEFAULT_MAX_LENGTH
) -> bool:
    """Check that a word is uppercase A-Z only and within the length bounds."""
    if not VALID_WORD_RE.fullmatch(word):
        return False
    return min_length <= len(word) <= max_length


def normalize_word(
    raw_word: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Optional[str]:
    """
    Canonicalize a raw source word into an admissible dictionary word.

    Args:
        raw_word: Word or phrase exactly as it appeared in the source file
        min_length: Minimum admissible length (inclusive)
        max_length: Maximum admissible length (inclusive)

    Returns:
        The uppercase A-Z word, or None if the word is rejected
    """
    if not raw_word:
        return None

    word = ascii_upper(strip_separators(raw_word))

    if not is_admissible(word, min_length, max_length):
        return None

    return word
