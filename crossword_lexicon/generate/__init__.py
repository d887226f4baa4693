"""
Frequency list generation for raw per-length word lists.

Architecture:
- frequency_generator: FrequencyListGenerator scores <n>_letter_words.txt files
  with the heuristic scorer and writes ranked <n>_letter_frequencies.json files
"""

from .frequency_generator import FrequencyListGenerator, FrequencyListResult

__all__ = ["FrequencyListGenerator", "FrequencyListResult"]
