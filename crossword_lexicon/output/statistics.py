"""
Build statistics and the human-readable report.

The report covers every registry source (loaded or not found) followed by
global figures for the written dictionary: totals, words by length, a score
histogram, sample high-scoring words per length, file size and elapsed time.
Per-source counters can also be exported as CSV.
"""

import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..data.data_structure import Entry, SourceStats

logger = logging.getLogger(__name__)

# Bucket label -> inclusive (low, high)
SCORE_BUCKETS = (
    ("1-10", 1, 10),
    ("11-25", 11, 25),
    ("26-50", 26, 50),
    ("51-75", 51, 75),
    ("76-100", 76, 100),
)

SOURCE_STATS_COLUMNS = [
    "file",
    "description",
    "priority",
    "status",
    "parsed",
    "skipped",
    "qualifying",
    "new_words",
    "upgraded_scores",
    "kept_existing",
]


def words_by_length(
    entries: Sequence[Entry], min_length: int, max_length: int
) -> Dict[int, int]:
    counts = {length: 0 for length in range(min_length, max_length + 1)}
    for entry in entries:
        counts[len(entry.word)] = counts.get(len(entry.word), 0) + 1
    return counts


def score_histogram(entries: Sequence[Entry]) -> Dict[str, int]:
    """Count entries per score bucket."""
    scores = np.array([entry.score for entry in entries], dtype=int)
    edges = [low for _, low, _ in SCORE_BUCKETS] + [SCORE_BUCKETS[-1][2] + 1]
    counts, _ = np.histogram(scores, bins=edges)
    return {label: int(count) for (label, _, _), count in zip(SCORE_BUCKETS, counts)}


def sample_high_scoring(
    entries: Sequence[Entry],
    min_length: int,
    max_length: int,
    threshold: int = 75,
    per_length: int = 10,
) -> Dict[int, List[Entry]]:
    """First `per_length` entries of each length (in dictionary order) scoring >= threshold."""
    samples = {length: [] for length in range(min_length, max_length + 1)}
    for entry in entries:
        bucket = samples.get(len(entry.word))
        if bucket is not None and entry.score >= threshold and len(bucket) < per_length:
            bucket.append(entry)
    return samples


class DictionaryStatistics:
    """
    Aggregated statistics for one build.

    Holds the per-source counters in registry order and derives the global
    figures from the written entries.
    """

    def __init__(
        self,
        source_stats: Sequence[SourceStats],
        entries: Sequence[Entry],
        min_length: int,
        max_length: int,
        output_file: Optional[Union[str, Path]] = None,
        elapsed_seconds: float = 0.0,
        sample_threshold: int = 75,
        samples_per_length: int = 10,
    ):
        self.source_stats = list(source_stats)
        self.entries = list(entries)
        self.min_length = min_length
        self.max_length = max_length
        self.output_file = Path(output_file) if output_file else None
        self.elapsed_seconds = elapsed_seconds
        self.sample_threshold = sample_threshold
        self.samples_per_length = samples_per_length

    @property
    def total_words(self) -> int:
        return len(self.entries)

    @property
    def by_length(self) -> Dict[int, int]:
        return words_by_length(self.entries, self.min_length, self.max_length)

    @property
    def histogram(self) -> Dict[str, int]:
        return score_histogram(self.entries)

    @property
    def samples(self) -> Dict[int, List[Entry]]:
        return sample_high_scoring(
            self.entries,
            self.min_length,
            self.max_length,
            self.sample_threshold,
            self.samples_per_length,
        )

    @property
    def file_size_bytes(self) -> int:
        if self.output_file is None or not self.output_file.exists():
            return 0
        return self.output_file.stat().st_size

    def format_source_report(self) -> List[str]:
        lines = []
        for stats in self.source_stats:
            lines.append(f"  {stats.file}")
            if not stats.found:
                lines.append(f"    SKIP: {stats.status}")
                lines.append("")
                continue

            lines.append(f"    {stats.description}")
            lines.append(
                f"    Parsed: {stats.parsed:,} | Qualifying "
                f"({self.min_length}-{self.max_length} letter): {stats.qualifying:,}"
            )
            lines.append(
                f"    New words added: {stats.new_words:,} | Score upgrades: "
                f"{stats.upgraded_scores:,} | Kept existing: {stats.kept_existing:,}"
            )
            if stats.skipped > 0:
                lines.append(f"    Skipped (invalid format): {stats.skipped:,}")
            lines.append("")
        return lines

    def format_summary_report(self) -> List[str]:
        lines = ["=== Master Dictionary Statistics ===", ""]
        if self.output_file is not None:
            lines.append(f"Output: {self.output_file}")
        lines.append(f"Total words: {self.total_words:,}")
        lines.append("")

        lines.append("Words by length:")
        for length, count in self.by_length.items():
            lines.append(f"  {length}-letter: {count:,}")
        lines.append("")

        lines.append("Score distribution:")
        total = self.total_words
        for label, count in self.histogram.items():
            pct = (count / total * 100) if total > 0 else 0.0
            bar = "█" * int(round(pct / 2))
            lines.append(f"  {label:<7}: {count:>8,} ({pct:5.1f}%) {bar}")
        lines.append("")

        lines.append(f"Sample high-scoring words (score >= {self.sample_threshold}):")
        for length, sample in self.samples.items():
            words = ", ".join(f"{entry.word}({entry.score})" for entry in sample)
            lines.append(f"  {length}-letter: {words}")
        lines.append("")

        size_mb = self.file_size_bytes / (1024 * 1024)
        lines.append(f"File size: {size_mb:.2f} MB")
        lines.append(f"Completed in {self.elapsed_seconds:.2f}s")
        return lines

    def format_report(self) -> str:
        lines = ["=== Building Crossword Master Dictionary ===", ""]
        lines.append(
            f"Filtering to {self.min_length}-{self.max_length} letter words, A-Z only"
        )
        lines.append("")
        lines.extend(self.format_source_report())
        lines.extend(self.format_summary_report())
        return "\n".join(lines)

    def source_stats_frame(self) -> pd.DataFrame:
        """Per-source counters as a DataFrame, one row per registry source."""
        rows = [asdict(stats) for stats in self.source_stats]
        if not rows:
            return pd.DataFrame(columns=SOURCE_STATS_COLUMNS)
        return pd.DataFrame(rows, columns=SOURCE_STATS_COLUMNS)

    def write_csv(self, filepath: Union[str, Path]):
        """Write the per-source counters as CSV."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        self.source_stats_frame().to_csv(filepath, index=False)
        logger.info(f"Wrote source statistics to {filepath}")
