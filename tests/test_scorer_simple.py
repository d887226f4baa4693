"""
Test suite for the heuristic frequency scorer.

Coefficients are tuning parameters, so these tests assert relative orderings
and structural properties rather than absolute raw scores.
"""

import pytest

from crossword_lexicon.utils.frequency_scorer import FrequencyScorer, normalize_scores
from crossword_lexicon.utils.lexical_tables import (
    COMMON_BIGRAMS,
    CROSSWORD_NAMES_4,
    CROSSWORD_NAMES_5,
    LETTER_FREQUENCY,
    MODERN_TERMS_4,
    MODERN_TERMS_5,
    VERY_COMMON_4_LETTER_WORDS,
    VERY_COMMON_5_LETTER_WORDS,
    VERY_COMMON_SHORT_WORDS,
)


@pytest.fixture
def scorer():
    return FrequencyScorer()


class TestLexicalTables:
    """Test the fixed tables the scorer relies on."""

    def test_letter_table_covers_alphabet(self):
        assert len(LETTER_FREQUENCY) == 26
        assert set(LETTER_FREQUENCY) == set("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

    def test_thirty_common_bigrams(self):
        assert len(COMMON_BIGRAMS) == 30
        assert all(len(bigram) == 2 for bigram in COMMON_BIGRAMS)

    def test_word_lists_match_their_lengths(self):
        assert all(2 <= len(w) <= 3 for w in VERY_COMMON_SHORT_WORDS)
        for words, length in [
            (VERY_COMMON_4_LETTER_WORDS, 4),
            (VERY_COMMON_5_LETTER_WORDS, 5),
            (CROSSWORD_NAMES_4, 4),
            (CROSSWORD_NAMES_5, 5),
            (MODERN_TERMS_4, 4),
            (MODERN_TERMS_5, 5),
        ]:
            assert all(len(w) == length for w in words)

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            LETTER_FREQUENCY["A"] = 1.0
        with pytest.raises(AttributeError):
            VERY_COMMON_SHORT_WORDS.add("ZZ")


class TestFrequencyScorer:
    """Test raw heuristic scores."""

    def test_common_short_word_scores_high(self, scorer):
        """THE is common, vowel-balanced and made of common bigrams."""
        breakdown = scorer.score_breakdown("THE")
        assert breakdown["bigrams"] > 0
        assert breakdown["word_lists"] > 0
        assert breakdown["final_score"] > 500

    def test_q_without_u_ranks_below_ax(self, scorer):
        """QI and AX both take the 2-letter penalties; QI also lacks its U."""
        qi = scorer.score_breakdown("QI")
        ax = scorer.score_breakdown("AX")
        assert qi["obscurity"] < 0 and ax["obscurity"] < 0
        assert qi["rare_letters"] < ax["rare_letters"]
        assert scorer.score_word("QI") < scorer.score_word("AX")

    def test_q_with_u_not_penalized_for_q(self, scorer):
        assert scorer.score_breakdown("QUIT")["rare_letters"] == 0
        assert scorer.score_breakdown("QAT")["rare_letters"] < 0

    def test_rare_letters_lower_score(self, scorer):
        assert scorer.score_word("JAB") < scorer.score_word("TAB")
        assert scorer.score_word("ZAP") < scorer.score_word("TAP")

    def test_common_bigrams_raise_score(self, scorer):
        assert scorer.score_breakdown("THIN")["bigrams"] > scorer.score_breakdown(
            "BCDF"
        )["bigrams"]

    def test_vowel_balance(self, scorer):
        assert scorer.score_breakdown("TONE")["vowel_ratio"] > 0
        assert scorer.score_breakdown("BRRR")["vowel_ratio"] < 0
        assert scorer.score_breakdown("AEIOU")["vowel_ratio"] < 0

    def test_word_list_boosts(self, scorer):
        assert scorer.score_word("HAVE") > scorer.score_word("HAVS")
        assert scorer.score_word("ABOUT") > scorer.score_word("ABOUS")
        assert scorer.score_word("EMMA") > scorer.score_word("EMMB")
        assert scorer.score_word("PIZZA") > scorer.score_word("PIZZB")

    def test_affix_boosts_apply_once(self, scorer):
        """A prefix and a suffix each contribute a single boost."""
        unred = scorer.score_breakdown("UNRED")
        plain = scorer.score_breakdown("ABCDE")
        assert plain["affixes"] == 0
        assert unred["affixes"] > 0
        assert scorer.score_breakdown("REDO")["affixes"] == scorer.score_breakdown(
            "INDO"
        )["affixes"]

    def test_obscure_two_letter_words_penalized(self, scorer):
        assert scorer.score_breakdown("TO")["obscurity"] == 0
        assert scorer.score_breakdown("OE")["obscurity"] < 0

    def test_score_clamped_to_one(self, scorer):
        breakdown = scorer.score_breakdown("ZQ")
        assert breakdown["final_score"] >= 1
        assert scorer.score_word("ZQ") >= 1

    def test_unknown_letters_tolerated(self, scorer):
        assert scorer.score_word("A?") >= 1

    def test_deterministic(self, scorer):
        assert scorer.score_word("CRANE") == FrequencyScorer().score_word("CRANE")


class TestNormalizeScores:
    """Test per-source min-max normalization."""

    def test_single_word_gets_100(self, scorer):
        assert scorer.score_source(["THE"]) == {"THE": 100}

    def test_all_equal_get_100(self):
        assert normalize_scores({"AB": 5.0, "CD": 5.0}) == {"AB": 100, "CD": 100}

    def test_empty(self):
        assert normalize_scores({}) == {}

    def test_extremes_map_to_0_and_100(self):
        result = normalize_scores({"LOW": 10.0, "MID": 20.0, "TOP": 30.0})
        assert result == {"LOW": 0, "MID": 50, "TOP": 100}

    def test_rounds_half_up(self):
        result = normalize_scores({"A": 0.0, "B": 1.0, "C": 200.0})
        # 100 * 1 / 200 = 0.5 rounds up
        assert result["B"] == 1

    def test_values_are_ints_in_range(self, scorer):
        result = scorer.score_source(["QI", "AX", "THE", "JAZZ", "ABOUT"])
        assert all(isinstance(v, int) for v in result.values())
        assert all(0 <= v <= 100 for v in result.values())

    def test_order_preserved_after_normalization(self, scorer):
        result = scorer.score_source(["QI", "AX"])
        assert result["QI"] < result["AX"]
        assert result == {"QI": 0, "AX": 100}


if __name__ == "__main__":
    pytest.main([__file__])
