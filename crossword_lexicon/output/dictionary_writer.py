"""
Master dictionary writer.

Emits the master dictionary as UTF-8 text with LF line endings:

    # Crossword Master Dictionary
    # Generated: YYYY-MM-DD
    # Format: WORD;SCORE (1-100)
    # Words: <count> (lengths <MIN>-<MAX>)
    #
    # Sources: <registry file names>
    #
    # Merge strategy: highest score wins across all sources
    # To regenerate: <command line>
    #
    WORD;SCORE
    ...

Downstream consumers parse the header lines; their wording and order are fixed.
The file is written to a sibling temporary file and renamed over the
destination, so readers never see a partial dictionary and a failed write
leaves any previous dictionary untouched.
"""

import logging
import os
import stat
import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..errors import InvariantViolationError, OutputWriteError
from ..data.data_structure import Entry, MasterDictionary, sort_key
from ..data.line_parser import MAX_SCORE, MIN_SCORE
from ..utils.text_utils import VALID_WORD_RE

logger = logging.getLogger(__name__)

GENERATED_PREFIX = "# Generated: "


def build_header(
    word_count: int,
    min_length: int,
    max_length: int,
    source_files: Sequence[str],
    regenerate_command: str,
    build_date: Optional[date] = None,
) -> List[str]:
    """Header comment lines, in their fixed order."""
    build_date = build_date or date.today()
    return [
        "# Crossword Master Dictionary",
        f"{GENERATED_PREFIX}{build_date.isoformat()}",
        "# Format: WORD;SCORE (1-100)",
        f"# Words: {word_count:,} (lengths {min_length}-{max_length})",
        "#",
        f"# Sources: {', '.join(source_files)}",
        "#",
        "# Merge strategy: highest score wins across all sources",
        f"# To regenerate: {regenerate_command}",
        "#",
    ]


def validate_entries(entries: Sequence[Entry], min_length: int, max_length: int):
    """
    Check every dictionary invariant on the sorted entries.

    Raises:
        InvariantViolationError: On an inadmissible word, an out-of-range score,
            a duplicate or an ordering violation
    """
    previous = None
    for entry in entries:
        if not VALID_WORD_RE.fullmatch(entry.word):
            raise InvariantViolationError(entry.word, entry.score, "word is not A-Z only")
        if not min_length <= len(entry.word) <= max_length:
            raise InvariantViolationError(
                entry.word,
                entry.score,
                f"length {len(entry.word)} outside {min_length}-{max_length}",
            )
        if not isinstance(entry.score, int) or not MIN_SCORE <= entry.score <= MAX_SCORE:
            raise InvariantViolationError(
                entry.word, entry.score, f"score outside {MIN_SCORE}-{MAX_SCORE}"
            )
        if previous is not None and sort_key(previous.word) >= sort_key(entry.word):
            raise InvariantViolationError(
                entry.word, entry.score, f"not strictly after {previous.word}"
            )
        previous = entry


def render_dictionary(header: Sequence[str], entries: Sequence[Entry]) -> str:
    lines = list(header) + [entry.to_line() for entry in entries]
    return "\n".join(lines) + "\n"


def output_file_mode(output_file: Path) -> int:
    """Permission bits for the written file: the existing file's, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(output_file.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def atomic_write_text(output_file: Union[str, Path], content: str):
    """
    Write text to a temporary file in the destination directory, then rename it
    over the destination.

    Raises:
        OutputWriteError: If the temporary file cannot be created, written or renamed
    """
    output_file = Path(output_file)
    temp_path = None

    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=output_file.parent,
            prefix=f".{output_file.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        # NamedTemporaryFile creates 0600; give the new file the old file's mode
        os.chmod(temp_path, output_file_mode(output_file))
        os.replace(temp_path, output_file)
    except OSError as e:
        if temp_path is not None and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_path}: {cleanup_error}")
        raise OutputWriteError(output_file, e)


def write_master_dictionary(
    master: MasterDictionary,
    output_file: Union[str, Path],
    source_files: Sequence[str],
    regenerate_command: str,
    build_date: Optional[date] = None,
) -> List[Entry]:
    """
    Validate, sort and atomically write the master dictionary.

    Args:
        master: Merged dictionary
        output_file: Destination path
        source_files: Registry file names, in registry order
        regenerate_command: Command line shown in the header
        build_date: Date for the Generated line (defaults to today)

    Returns:
        The sorted entries that were written
    """
    entries = master.sorted_entries()
    validate_entries(entries, master.min_length, master.max_length)

    header = build_header(
        len(entries),
        master.min_length,
        master.max_length,
        source_files,
        regenerate_command,
        build_date,
    )
    atomic_write_text(output_file, render_dictionary(header, entries))

    logger.info(f"Wrote {len(entries)} entries to {output_file}")
    return entries


def read_master_dictionary(dictionary_file: Union[str, Path]) -> List[Entry]:
    """Read the records of a written master dictionary, skipping header lines."""
    entries = []
    with open(dictionary_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line or line.startswith("#"):
                continue
            word, _, score = line.rpartition(";")
            entries.append(Entry(word, int(score)))
    return entries
