"""
Source Loader

Reads one registered source file fully into memory and reduces it to a
word -> best score map:

- Scored sources: every line goes through parse_line() and normalize_word();
  duplicates within the file keep the higher score.
- Unscored sources: every line is a raw word or phrase; admissible words are
  scored by the heuristic FrequencyScorer and min-max normalized across the
  source.

Lines that are non-empty, non-comment and fail parsing or normalization are
counted as skipped. Nothing here touches the master dictionary.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..errors import SourceReadError
from ..utils.frequency_scorer import FrequencyScorer, get_scorer
from ..utils.text_utils import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, normalize_word
from .data_structure import LoadedSource, SourceDescriptor
from .line_parser import MIN_SCORE, is_blank_or_comment, parse_line, parse_unscored_line

logger = logging.getLogger(__name__)


class SourceLoader:
    """
    Loads source files into per-source word maps.

    One loader is shared by every source of a build; it holds only the
    admissibility bounds and the scorer used for unscored sources.
    """

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int = DEFAULT_MAX_LENGTH,
        scorer: Optional[FrequencyScorer] = None,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.scorer = scorer or get_scorer()

    def read_lines(self, file_path: Union[str, Path]) -> List[str]:
        """Read a whole source file as UTF-8 lines (a leading BOM is dropped, undecodable bytes are replaced)."""
        try:
            with open(file_path, "r", encoding="utf-8-sig", errors="replace", newline="") as f:
                content = f.read()
        except OSError as e:
            raise SourceReadError(file_path, e)
        return content.split("\n")

    def load(self, file_path: Union[str, Path], source: SourceDescriptor) -> LoadedSource:
        """
        Load and reduce one source file.

        Args:
            file_path: Path to the source file
            source: Registry record for the file

        Returns:
            LoadedSource with the best score per admissible word and line counters

        Raises:
            SourceReadError: If the file cannot be read
        """
        lines = self.read_lines(file_path)

        if source.scored:
            loaded = self.parse_scored_lines(lines, source)
        else:
            loaded = self.parse_unscored_lines(lines, source)

        logger.debug(
            f"Loaded {source.file}: {loaded.parsed} parsed, {loaded.skipped} skipped, "
            f"{len(loaded.words)} qualifying"
        )
        return loaded

    def parse_scored_lines(self, lines: List[str], source: SourceDescriptor) -> LoadedSource:
        """Reduce WORD;SCORE lines, keeping the higher score for repeated words."""
        loaded = LoadedSource(source=source)
        words = loaded.words

        for line in lines:
            if is_blank_or_comment(line):
                continue

            parsed = parse_line(line)
            word = None
            if parsed is not None:
                raw_word, score = parsed
                word = normalize_word(raw_word, self.min_length, self.max_length)

            if word is None:
                loaded.skipped += 1
                continue

            loaded.parsed += 1
            existing = words.get(word)
            if existing is None or score > existing:
                words[word] = score

        return loaded

    def parse_unscored_lines(
        self, lines: List[str], source: SourceDescriptor
    ) -> LoadedSource:
        """Collect raw words and assign normalized heuristic scores."""
        loaded = LoadedSource(source=source)
        admitted = []
        seen = set()

        for line in lines:
            if is_blank_or_comment(line):
                continue

            raw_word = parse_unscored_line(line)
            word = (
                normalize_word(raw_word, self.min_length, self.max_length)
                if raw_word
                else None
            )
            if word is None:
                loaded.skipped += 1
                continue

            loaded.parsed += 1
            if word not in seen:
                seen.add(word)
                admitted.append(word)

        loaded.words = to_dictionary_scores(self.scorer.score_source(admitted))
        return loaded


def to_dictionary_scores(normalized: Dict[str, int]) -> Dict[str, int]:
    """Lift normalized heuristic scores into the dictionary range [1, 100]."""
    return {word: max(MIN_SCORE, score) for word, score in normalized.items()}
