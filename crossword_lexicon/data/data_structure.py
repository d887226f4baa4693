"""
Data structures for the master dictionary build.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

STATUS_LOADED = "loaded"
STATUS_NOT_FOUND = "not found"


@dataclass(frozen=True)
class Entry:
    """
    One master dictionary record.

    Attributes:
        word: Admissible uppercase A-Z word
        score: Crossword fill-quality score (1-100, higher is better)
    """

    word: str
    score: int

    def to_line(self) -> str:
        return f"{self.word};{self.score}"


@dataclass(frozen=True)
class SourceDescriptor:
    """
    One source word list in the registry.

    Attributes:
        file: File name relative to the source directory
        priority: Informational ranking, shown in reports only
        description: Human-readable description for the report
        scored: False for raw word lists whose scores come from the heuristic scorer
    """

    file: str
    priority: int
    description: str
    scored: bool = True


@dataclass
class SourceStats:
    """
    Counters produced while loading and merging one source.

    Attributes:
        parsed: Lines that produced an admissible word
        skipped: Non-empty, non-comment lines rejected by parsing or normalization
        qualifying: Distinct admissible words in the source
        new_words: Words the source introduced to the master dictionary
        upgraded_scores: Words whose master score the source raised
        kept_existing: Words whose master score was already at least as high
    """

    file: str
    description: str
    priority: int
    status: str = STATUS_LOADED
    parsed: int = 0
    skipped: int = 0
    qualifying: int = 0
    new_words: int = 0
    upgraded_scores: int = 0
    kept_existing: int = 0

    @classmethod
    def for_source(cls, source: SourceDescriptor, status: str = STATUS_LOADED):
        return cls(
            file=source.file,
            description=source.description,
            priority=source.priority,
            status=status,
        )

    @property
    def found(self) -> bool:
        return self.status != STATUS_NOT_FOUND


@dataclass
class LoadedSource:
    """A source reduced to its per-word best scores, ready for merging."""

    source: SourceDescriptor
    words: Dict[str, int] = field(default_factory=dict)
    parsed: int = 0
    skipped: int = 0


@dataclass
class MasterDictionary:
    """
    Word -> score mapping built by the merger.

    Attributes:
        scores: Best score observed for every admitted word
        min_length: Minimum admissible word length for this build
        max_length: Maximum admissible word length for this build
    """

    scores: Dict[str, int] = field(default_factory=dict)
    min_length: int = 2
    max_length: int = 5

    def __len__(self) -> int:
        return len(self.scores)

    def __contains__(self, word: str) -> bool:
        return word in self.scores

    def get(self, word: str, default=None):
        return self.scores.get(word, default)

    def sorted_entries(self) -> List[Entry]:
        """Entries ordered by length ascending, then codepoint order."""
        return [
            Entry(word, self.scores[word])
            for word in sorted(self.scores, key=sort_key)
        ]


def sort_key(word: str) -> Tuple[int, str]:
    return (len(word), word)
