"""
Utilities package for the crossword master dictionary builder.

This package provides configuration management, word normalization and the
heuristic frequency scorer.
"""

from .text_utils import normalize_word, is_admissible, ascii_upper, strip_separators
from .config_loader import ConfigLoader, get_config, reload_config
from .frequency_scorer import FrequencyScorer, normalize_scores

__all__ = [
    "normalize_word",
    "is_admissible",
    "ascii_upper",
    "strip_separators",
    "ConfigLoader",
    "get_config",
    "reload_config",
    "FrequencyScorer",
    "normalize_scores",
]
