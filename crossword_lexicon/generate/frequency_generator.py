"""
Per-length word frequency list generation.

Scores raw word lists with the heuristic FrequencyScorer and writes one JSON
frequency file per word length, for consumers that want a ranked list of
candidate words without building the full master dictionary.

For each length n, reads  <word_list_dir>/<n>_letter_words.txt
and writes              <output_dir>/<n>_letter_frequencies.json

Output format: a JSON list of {"word": "THE", "frequency": 100}, sorted by
frequency descending then word.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..data.line_parser import parse_unscored_line
from ..utils.frequency_scorer import FrequencyScorer, get_scorer
from ..utils.text_utils import normalize_word

logger = logging.getLogger(__name__)

WORD_LIST_PATTERN = "{length}_letter_words.txt"
FREQUENCY_FILE_PATTERN = "{length}_letter_frequencies.json"


@dataclass
class FrequencyListResult:
    """Outcome of generating the frequency list for one word length."""

    length: int
    input_path: Path
    output_path: Optional[Path] = None
    frequencies: List[Dict[str, Union[str, int]]] = field(default_factory=list)
    status: str = "generated"

    @property
    def top_words(self) -> List[str]:
        return [item["word"] for item in self.frequencies[:10]]


class FrequencyListGenerator:
    """
    Generates ranked frequency lists for raw per-length word lists.
    """

    def __init__(
        self,
        word_list_dir: Union[str, Path],
        output_dir: Union[str, Path],
        scorer: Optional[FrequencyScorer] = None,
    ):
        self.word_list_dir = Path(word_list_dir)
        self.output_dir = Path(output_dir)
        self.scorer = scorer or get_scorer()

    def read_words(self, input_path: Path, length: int) -> List[str]:
        """Admissible words of exactly `length` letters, in first-seen order."""
        words = []
        seen = set()
        with open(input_path, "r", encoding="utf-8-sig", errors="replace") as f:
            for line in f:
                raw_word = parse_unscored_line(line)
                if raw_word is None:
                    continue
                word = normalize_word(raw_word, length, length)
                if word is not None and word not in seen:
                    seen.add(word)
                    words.append(word)
        return words

    def rank_words(self, words: List[str]) -> List[Dict[str, Union[str, int]]]:
        normalized = self.scorer.score_source(words)
        ranked = sorted(normalized.items(), key=lambda kv: (-kv[1], kv[0]))
        return [{"word": word, "frequency": score} for word, score in ranked]

    def generate_for_length(self, length: int) -> FrequencyListResult:
        """
        Generate the frequency file for one word length.

        A missing input file is logged and reported with status "not found".
        """
        input_path = self.word_list_dir / WORD_LIST_PATTERN.format(length=length)
        result = FrequencyListResult(length=length, input_path=input_path)

        if not input_path.is_file():
            logger.warning(f"{input_path} not found, skipping {length}-letter words")
            result.status = "not found"
            return result

        words = self.read_words(input_path, length)
        result.frequencies = self.rank_words(words)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_dir / FREQUENCY_FILE_PATTERN.format(length=length)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(result.frequencies, f, indent=2)
        result.output_path = output_path

        logger.info(
            f"Generated {len(result.frequencies)} {length}-letter frequencies "
            f"to {output_path}"
        )
        return result

    def generate(self, min_length: int = 2, max_length: int = 5) -> List[FrequencyListResult]:
        """Generate frequency files for every length in [min_length, max_length]."""
        return [
            self.generate_for_length(length)
            for length in range(min_length, max_length + 1)
        ]
