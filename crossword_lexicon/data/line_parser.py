"""
Line parser shared by every source word list.

All scored sources use the same line grammar, so a single parser covers them:

    WORD;SCORE
    word;score
    Phrase With Spaces;Score
    # comment

The parser never raises; structurally invalid lines yield None.
"""

import re
from typing import Optional, Tuple

MIN_SCORE = 1
MAX_SCORE = 100

SCORE_RE = re.compile(r"[0-9]+")


def is_blank_or_comment(line: str) -> bool:
    """True for empty lines and lines whose first non-whitespace character is '#'."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_score(raw_score: str) -> Optional[int]:
    """
    Parse a score field into an integer in [1, 100].

    Surrounding whitespace and trailing commas are tolerated ("80, " parses as 80).
    """
    text = raw_score.strip().rstrip(",").strip()
    if not SCORE_RE.fullmatch(text):
        return None

    score = int(text)
    if score < MIN_SCORE or score > MAX_SCORE:
        return None
    return score


def parse_line(line: str) -> Optional[Tuple[str, int]]:
    """
    Parse one line of a scored source.

    The line is split at the last semicolon so that a word containing ';'
    stays joined on the left. The word is returned verbatim for the
    normalizer.

    Args:
        line: Raw line from a source file

    Returns:
        (raw_word, score) or None for blank, comment and malformed lines
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None

    raw_word, separator, raw_score = trimmed.rpartition(";")
    if not separator:
        return None

    score = parse_score(raw_score)
    if score is None:
        return None

    return raw_word, score


def parse_unscored_line(line: str) -> Optional[str]:
    """
    Parse one line of a raw word list (one word or phrase per line).

    Anything after a final semicolon is ignored, so scored files can also be
    fed through the heuristic scorer.
    """
    trimmed = line.strip()
    if not trimmed or trimmed.startswith("#"):
        return None

    raw_word, separator, _ = trimmed.rpartition(";")
    if not separator:
        raw_word = trimmed
    return raw_word or None
