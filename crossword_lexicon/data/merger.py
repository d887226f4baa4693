"""
Cross-source merger.

Folds per-source word maps into the master dictionary under the
"highest score wins" policy. The final map is independent of source order
(max is commutative); only the attribution counters depend on it, so
callers must merge sources in registry order.
"""

import logging

from .data_structure import LoadedSource, MasterDictionary, SourceStats

logger = logging.getLogger(__name__)


class MasterMerger:
    """
    Owns the master dictionary for the duration of a build.

    Scores are only ever raised; entries are never removed.
    """

    def __init__(self, min_length: int = 2, max_length: int = 5):
        self.master = MasterDictionary(min_length=min_length, max_length=max_length)

    def merge(self, loaded: LoadedSource) -> SourceStats:
        """
        Merge one loaded source into the master dictionary.

        Args:
            loaded: Source reduced to its best score per word

        Returns:
            SourceStats with parse counters and merge attribution counters
        """
        stats = SourceStats.for_source(loaded.source)
        stats.parsed = loaded.parsed
        stats.skipped = loaded.skipped
        stats.qualifying = len(loaded.words)

        scores = self.master.scores
        for word, score in loaded.words.items():
            existing = scores.get(word)
            if existing is None:
                scores[word] = score
                stats.new_words += 1
            elif score > existing:
                scores[word] = score
                stats.upgraded_scores += 1
            else:
                stats.kept_existing += 1

        logger.info(
            f"Merged {loaded.source.file}: {stats.new_words} new, "
            f"{stats.upgraded_scores} upgraded, {stats.kept_existing} kept "
            f"(master size {len(self.master)})"
        )
        return stats
