"""
Heuristic Frequency Scorer Module

Assigns synthetic crossword fill-quality scores to words from sources that
deliver only raw words. True corpus frequency data is not available for every
source, so the score is a hand-crafted approximation built from letter
statistics: a crossword fill engine prefers common, vowel-balanced words made
of common bigrams.

Architecture:
- Raw score: base of 100 plus additive feature adjustments, clamped to >= 1
- Per-source normalization: min-max rescaling of a whole source into [0, 100]

Features (computed on the uppercase word):
- Letter-frequency sum from an English unigram table
- Common-bigram bonus per occurrence
- Vowel-ratio reward or penalty
- Rare-letter penalties (Q without U, X/Z, J)
- Boosts for curated common words, crossword names and modern terms
- Affix boosts (ED/ER/LY, ING/TION, UN/RE/IN)
- Obscurity penalty for uncommon 2-letter words

The coefficients are tuning parameters. Callers and tests should rely on the
relative ordering of scores, not on absolute values.
"""

import logging
from typing import Dict, Iterable, Optional

import numpy as np

from .lexical_tables import (
    COMMON_BIGRAMS,
    CROSSWORD_NAMES_4,
    CROSSWORD_NAMES_5,
    LETTER_FREQUENCY,
    MODERN_TERMS_4,
    MODERN_TERMS_5,
    UNKNOWN_LETTER_FREQUENCY,
    VERY_COMMON_4_LETTER_WORDS,
    VERY_COMMON_5_LETTER_WORDS,
    VERY_COMMON_SHORT_WORDS,
    VOWELS,
)

logger = logging.getLogger(__name__)

BASE_SCORE = 100.0
BIGRAM_BONUS = 10.0

IDEAL_VOWEL_BONUS = 20.0
POOR_VOWEL_PENALTY = -30.0

Q_WITHOUT_U_PENALTY = -50.0
X_OR_Z_PENALTY = -20.0
J_PENALTY = -15.0

SHORT_SUFFIX_BOOST = 20.0
LONG_SUFFIX_BOOST = 25.0
PREFIX_BOOST = 15.0

OBSCURE_TWO_LETTER_PENALTY = -50.0

MIN_RAW_SCORE = 1.0

# (word list, boost) pairs; a word collects the boost of every list it is in
LIST_BOOSTS = (
    (VERY_COMMON_SHORT_WORDS, 500.0),
    (VERY_COMMON_4_LETTER_WORDS, 400.0),
    (VERY_COMMON_5_LETTER_WORDS, 350.0),
    (CROSSWORD_NAMES_4, 300.0),
    (CROSSWORD_NAMES_5, 280.0),
    (MODERN_TERMS_4, 250.0),
    (MODERN_TERMS_5, 230.0),
)


class FrequencyScorer:
    """
    Feature-based scorer that synthesizes crossword fill-quality scores.

    Scoring is deterministic and stateless; one instance can be shared by
    every unscored source of a build.
    """

    def score_breakdown(self, word: str) -> Dict[str, float]:
        """
        Compute every feature contribution for a word.

        Args:
            word: Uppercase A-Z word

        Returns:
            Dictionary of feature contributions plus "raw_score" (unclamped sum)
            and "final_score" (clamped to >= 1)
        """
        length = len(word)

        letter_score = sum(
            LETTER_FREQUENCY.get(char, UNKNOWN_LETTER_FREQUENCY) for char in word
        )

        bigram_score = BIGRAM_BONUS * sum(
            1 for i in range(length - 1) if word[i : i + 2] in COMMON_BIGRAMS
        )

        vowel_score = 0.0
        if length:
            vowel_ratio = sum(1 for char in word if char in VOWELS) / length
            if 0.3 <= vowel_ratio <= 0.5:
                vowel_score = IDEAL_VOWEL_BONUS
            elif vowel_ratio < 0.2 or vowel_ratio > 0.6:
                vowel_score = POOR_VOWEL_PENALTY

        rarity_score = 0.0
        if "Q" in word and "U" not in word:
            rarity_score += Q_WITHOUT_U_PENALTY
        if "X" in word or "Z" in word:
            rarity_score += X_OR_Z_PENALTY
        if "J" in word:
            rarity_score += J_PENALTY

        list_score = sum(boost for words, boost in LIST_BOOSTS if word in words)

        affix_score = 0.0
        if word.endswith(("ED", "ER", "LY")):
            affix_score += SHORT_SUFFIX_BOOST
        if word.endswith(("ING", "TION")):
            affix_score += LONG_SUFFIX_BOOST
        if word.startswith(("UN", "RE", "IN")):
            affix_score += PREFIX_BOOST

        obscurity_score = 0.0
        if length == 2 and word not in VERY_COMMON_SHORT_WORDS:
            obscurity_score = OBSCURE_TWO_LETTER_PENALTY

        raw_score = (
            BASE_SCORE
            + letter_score
            + bigram_score
            + vowel_score
            + rarity_score
            + list_score
            + affix_score
            + obscurity_score
        )

        return {
            "letter_frequency": letter_score,
            "bigrams": bigram_score,
            "vowel_ratio": vowel_score,
            "rare_letters": rarity_score,
            "word_lists": list_score,
            "affixes": affix_score,
            "obscurity": obscurity_score,
            "raw_score": raw_score,
            "final_score": max(raw_score, MIN_RAW_SCORE),
        }

    def score_word(self, word: str) -> float:
        """Raw heuristic score for a single word (>= 1, unbounded above)."""
        return self.score_breakdown(word)["final_score"]

    def score_words(self, words: Iterable[str]) -> Dict[str, float]:
        """Raw heuristic scores for a collection of words."""
        return {word: self.score_word(word) for word in words}

    def score_source(self, words: Iterable[str]) -> Dict[str, int]:
        """Score every word of one source and normalize across that source."""
        raw_scores = self.score_words(words)
        if raw_scores:
            logger.debug(
                f"Heuristic scores for {len(raw_scores)} words: "
                f"min={min(raw_scores.values()):.2f}, max={max(raw_scores.values()):.2f}"
            )
        return normalize_scores(raw_scores)


def normalize_scores(raw_scores: Dict[str, float]) -> Dict[str, int]:
    """
    Min-max normalize one source's raw scores into integers in [0, 100].

    Uses round-half-up: round(100 * (s - min) / (max - min)). When every word
    has the same raw score (including a single-word source) all words get 100.

    Args:
        raw_scores: Mapping word -> raw heuristic score

    Returns:
        Mapping word -> normalized integer score
    """
    if not raw_scores:
        return {}

    words = list(raw_scores)
    values = np.array([raw_scores[word] for word in words], dtype=float)
    low, high = values.min(), values.max()

    if high == low:
        return {word: 100 for word in words}

    scaled = np.floor(100.0 * (values - low) / (high - low) + 0.5).astype(int)
    return {word: int(score) for word, score in zip(words, scaled)}


_default_scorer: Optional[FrequencyScorer] = None


def get_scorer() -> FrequencyScorer:
    """Shared scorer instance."""
    global _default_scorer
    if _default_scorer is None:
        _default_scorer = FrequencyScorer()
    return _default_scorer
