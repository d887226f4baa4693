"""
Master Dictionary Builder for the crossword lexicon

This module implements the complete batch pipeline that turns the registered
source word lists into one deterministic master dictionary.

Key Features:
- Ordered source registry with tolerant handling of missing files
- Shared line parser and normalizer for every scored source
- Heuristic scoring for raw word lists
- "Highest score wins" merge with per-source attribution counters
- Atomic output write and a statistics report

Architecture:
- DictionaryBuilder: Main orchestrator class
- SourceLoader: per-source parse/normalize/score reduction
- MasterMerger: serial cross-source merge in registry order
- dictionary_writer / DictionaryStatistics: output and report

Sources may be parsed by a bounded worker pool, but they are always merged in
registry order so that the counters are reproducible. Nothing is written
before the final atomic rename; interrupting a build leaves the previous
dictionary in place.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

import psutil

from ..errors import ConfigurationError
from ..output.dictionary_writer import write_master_dictionary
from ..output.statistics import DictionaryStatistics
from ..utils.config_loader import get_config
from ..utils.frequency_scorer import FrequencyScorer
from .data_structure import (
    STATUS_NOT_FOUND,
    Entry,
    LoadedSource,
    MasterDictionary,
    SourceDescriptor,
    SourceStats,
)
from .merger import MasterMerger
from .source_loader import SourceLoader
from .source_registry import get_default_registry, registry_file_names

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of one build."""

    master: MasterDictionary
    entries: List[Entry]
    source_stats: List[SourceStats]
    statistics: DictionaryStatistics
    output_file: Path


class DictionaryBuilder:
    """
    Main orchestrator for building the crossword master dictionary.

    Every argument left as None falls back to the configuration file
    (see lexicon_config.txt) and then to built-in defaults.
    """

    def __init__(
        self,
        source_dir: Optional[Union[str, Path]] = None,
        output_file: Optional[Union[str, Path]] = None,
        registry: Optional[Sequence[SourceDescriptor]] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        parse_workers: Optional[int] = None,
        regenerate_command: Optional[str] = None,
        scorer: Optional[FrequencyScorer] = None,
    ):
        self.config = get_config()
        build_config = self.config.get_build_config()

        self.source_dir = Path(source_dir or build_config["source_dir"])
        self.output_file = Path(output_file or build_config["output_file"])
        self.registry = list(registry) if registry is not None else get_default_registry()
        self.min_length = (
            min_length if min_length is not None else build_config["min_length"]
        )
        self.max_length = (
            max_length if max_length is not None else build_config["max_length"]
        )
        self.parse_workers = max(
            1,
            parse_workers if parse_workers is not None else build_config["parse_workers"],
        )
        self.regenerate_command = regenerate_command or build_config["regenerate_command"]
        self.sample_threshold = build_config["sample_threshold"]
        self.samples_per_length = build_config["samples_per_length"]

        self.loader = SourceLoader(self.min_length, self.max_length, scorer)

        # Memory tracking
        self.initial_memory = self._get_memory_usage()

    def _get_memory_usage(self) -> Dict[str, float]:
        """Get current memory usage statistics."""
        try:
            process = psutil.Process()
            memory_info = process.memory_info()
            return {
                "rss_mb": memory_info.rss / 1024 / 1024,
                "vms_mb": memory_info.vms / 1024 / 1024,
                "percent": process.memory_percent(),
            }
        except psutil.Error as e:
            logger.debug(f"Failed to get memory usage: {e}")
            return {"rss_mb": 0, "vms_mb": 0, "percent": 0}

    def _log_memory_usage(self, context: str):
        """Log current memory usage with context."""
        current_memory = self._get_memory_usage()
        memory_change = current_memory["rss_mb"] - self.initial_memory["rss_mb"]

        logger.debug(
            f"MEMORY_USAGE ({context}): "
            f"RSS={current_memory['rss_mb']:.1f}MB "
            f"({memory_change:+.1f}MB), "
            f"VMS={current_memory['vms_mb']:.1f}MB, "
            f"Percent={current_memory['percent']:.1f}%"
        )

        return current_memory

    def validate(self):
        """
        Check the build configuration before any source is read.

        Raises:
            ConfigurationError: On bad length bounds, an empty registry, a missing
                source directory or a missing/unwritable output directory
        """
        if self.min_length < 1 or self.max_length < self.min_length:
            raise ConfigurationError(
                f"Invalid word length bounds: {self.min_length}-{self.max_length}"
            )

        if not self.registry:
            raise ConfigurationError("Source registry is empty")

        if not self.source_dir.is_dir():
            raise ConfigurationError(f"Source directory not found: {self.source_dir}")

        output_dir = self.output_file.parent
        if not output_dir.is_dir():
            raise ConfigurationError(f"Output directory not found: {output_dir}")
        if not os.access(output_dir, os.W_OK):
            raise ConfigurationError(f"Output directory is not writable: {output_dir}")
        if self.output_file.is_dir():
            raise ConfigurationError(f"Output path is a directory: {self.output_file}")

    def _load_source(self, source: SourceDescriptor) -> Optional[LoadedSource]:
        file_path = self.source_dir / source.file
        if not file_path.is_file():
            return None
        return self.loader.load(file_path, source)

    def iter_loaded_sources(
        self,
    ) -> Iterator[Tuple[SourceDescriptor, Optional[LoadedSource]]]:
        """
        Yield (source, loaded source or None if the file is missing) in registry order.

        With more than one parse worker, sources are parsed concurrently but
        still yielded in registry order.
        """
        if self.parse_workers == 1 or len(self.registry) == 1:
            for source in self.registry:
                yield source, self._load_source(source)
            return

        logger.info(f"Parsing sources with {self.parse_workers} workers")
        with ThreadPoolExecutor(max_workers=self.parse_workers) as executor:
            loaded_sources = executor.map(self._load_source, self.registry)
            for source, loaded in zip(self.registry, loaded_sources):
                yield source, loaded

    def merge_sources(self) -> Tuple[MasterDictionary, List[SourceStats]]:
        """
        Load and merge every registry source.

        Returns:
            Tuple of (master dictionary, per-source statistics in registry order)
        """
        merger = MasterMerger(self.min_length, self.max_length)
        source_stats = []

        for source, loaded in self.iter_loaded_sources():
            if loaded is None:
                logger.warning(
                    f"SKIP: {source.file} (file not found in {self.source_dir})"
                )
                source_stats.append(SourceStats.for_source(source, STATUS_NOT_FOUND))
                continue

            stats = merger.merge(loaded)
            source_stats.append(stats)
            self._log_memory_usage(f"AFTER {source.file}")

        return merger.master, source_stats

    def build(self, build_date: Optional[date] = None) -> BuildResult:
        """
        Run the full pipeline: validate, load, merge, write, summarize.

        Args:
            build_date: Date for the header's Generated line (defaults to today)

        Returns:
            BuildResult with the master dictionary, written entries and statistics

        Raises:
            ConfigurationError: If the configuration is unusable
            SourceReadError: If an existing source cannot be read
            OutputWriteError: If the dictionary cannot be written
            InvariantViolationError: If an invalid entry reaches the writer
        """
        start_time = time.time()
        self.validate()

        logger.info(
            f"BUILD_START: {len(self.registry)} sources from {self.source_dir}, "
            f"lengths {self.min_length}-{self.max_length}"
        )
        self._log_memory_usage("START")

        master, source_stats = self.merge_sources()

        entries = write_master_dictionary(
            master,
            self.output_file,
            registry_file_names(self.registry),
            self.regenerate_command,
            build_date,
        )

        elapsed = time.time() - start_time
        statistics = DictionaryStatistics(
            source_stats,
            entries,
            self.min_length,
            self.max_length,
            output_file=self.output_file,
            elapsed_seconds=elapsed,
            sample_threshold=self.sample_threshold,
            samples_per_length=self.samples_per_length,
        )

        self._log_memory_usage("END")
        logger.info(f"BUILD_COMPLETE: {len(entries)} words in {elapsed:.2f}s")

        return BuildResult(
            master=master,
            entries=entries,
            source_stats=source_stats,
            statistics=statistics,
            output_file=self.output_file,
        )
