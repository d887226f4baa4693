"""
Source registry for the master dictionary build.

The registry is the ordered list of source word lists consulted by a build.
Files not on the list are ignored. Order matters: sources are merged in
registry order, which makes the per-source counters reproducible. Priority
is informational and never influences score selection.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..errors import ConfigurationError
from .data_structure import SourceDescriptor

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY: List[SourceDescriptor] = [
    # Primary lists (large, comprehensive, already scored)
    SourceDescriptor(
        "xwordlist.dict.txt", 1, "XWord Info master list (~568K entries)"
    ),
    SourceDescriptor(
        "Broda List 03.2020 trimmed by Diehl.TXT",
        2,
        "Broda/Diehl curated list (~279K entries)",
    ),
    SourceDescriptor("spreadthewordlist.txt", 3, "Spread The Wordlist (~311K entries)"),
    SourceDescriptor(
        "crossword_wordlist.txt", 4, "Chris Jones crossword wordlist (~176K entries)"
    ),
    # Supplementary themed lists (small, specialized)
    SourceDescriptor("tech.dict", 5, "Tech terms (~1.8K entries)"),
    SourceDescriptor("celebs-scored.dict", 5, "Celebrity names (~2K entries)"),
    SourceDescriptor(
        "urbandictionary-scored.dict", 5, "Urban dictionary terms (~1.3K entries)"
    ),
    SourceDescriptor("netspeak-scored.dict", 5, "Internet slang (~200 entries)"),
    SourceDescriptor("colleges-scored.dict", 5, "College names (~120 entries)"),
    SourceDescriptor("websites-scored.dict", 5, "Website names (~285 entries)"),
]


def get_default_registry() -> List[SourceDescriptor]:
    """Return a copy of the built-in registry."""
    return list(DEFAULT_REGISTRY)


def load_registry(registry_path: Union[str, Path]) -> List[SourceDescriptor]:
    """
    Load a custom registry from a JSON file.

    The file holds a list of objects:
        [{"file": "a.dict", "priority": 1, "description": "A", "scored": true}, ...]
    "priority" defaults to the 1-based position, "description" to the file
    name and "scored" to true.

    Args:
        registry_path: Path to the JSON registry

    Returns:
        Ordered list of SourceDescriptor objects

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    registry_path = Path(registry_path)

    try:
        with open(registry_path, "r", encoding="utf-8") as f:
            records = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Registry file not found: {registry_path}")
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read registry {registry_path}: {e}")

    if not isinstance(records, list) or not records:
        raise ConfigurationError(
            f"Registry {registry_path} must be a non-empty JSON list of sources"
        )

    registry = []
    seen_files = set()
    for position, record in enumerate(records, 1):
        if not isinstance(record, dict) or not record.get("file"):
            raise ConfigurationError(
                f"Registry {registry_path} entry {position} has no 'file': {record!r}"
            )

        file_name = str(record["file"])
        if file_name in seen_files:
            raise ConfigurationError(
                f"Registry {registry_path} lists {file_name} more than once"
            )
        seen_files.add(file_name)

        try:
            priority = int(record.get("priority", position))
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Registry {registry_path} entry {position} has invalid priority: "
                f"{record.get('priority')!r}"
            )

        scored = record.get("scored", True)
        if not isinstance(scored, bool):
            raise ConfigurationError(
                f"Registry {registry_path} entry {position} has invalid scored flag: "
                f"{scored!r} (expected true or false)"
            )

        registry.append(
            SourceDescriptor(
                file=file_name,
                priority=priority,
                description=str(record.get("description", file_name)),
                scored=scored,
            )
        )

    logger.info(f"Loaded registry with {len(registry)} sources from {registry_path}")
    return registry


def registry_file_names(registry: List[SourceDescriptor]) -> List[str]:
    return [source.file for source in registry]
