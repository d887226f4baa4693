#!/usr/bin/env python3
"""
Crossword Master Dictionary Builder

Merges all registered word list sources into a single master .dict file
containing only short (2-5 letter by default) words with scores, suitable for
a crossword generator's word index.

Format: WORD;SCORE (one per line, uppercase A-Z only, score 1-100)

Usage Examples:
  # Build with the built-in registry and configured paths
  python build_master_dictionary.py

  # Override paths and bounds
  python build_master_dictionary.py build --source-dir word-lists --output master.dict
  python build_master_dictionary.py build --registry sources.json --max-length 6 --stats-csv stats.csv

  # Score raw per-length word lists into JSON frequency files
  python build_master_dictionary.py score-lists --word-list-dir database --output-dir database/word_frequencies

The report goes to standard output; warnings and logging go to standard error.
Exit code is 0 on success and 1 on any fatal configuration or I/O error.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from crossword_lexicon.data.dictionary_builder import DictionaryBuilder
from crossword_lexicon.data.source_registry import load_registry
from crossword_lexicon.errors import LexiconError
from crossword_lexicon.generate.frequency_generator import FrequencyListGenerator
from crossword_lexicon.utils.config_loader import get_config, reload_config


def get_config_defaults():
    """Get configuration defaults for CLI arguments."""
    return get_config().get_cli_defaults()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup logging on stderr, with optional file output for traceability."""
    level = logging.DEBUG if verbose else logging.WARNING

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always detailed in file
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logging.info("=== CROSSWORD MASTER DICTIONARY BUILD TRACE ===")
        logging.info(f"Start time: {datetime.now().isoformat()}")
        logging.info(f"Log file: {log_file}")
        logging.info(f"Verbose mode: {verbose}")
        logging.info("=" * 60)

    return log_file


def run_build(args) -> bool:
    """Build the master dictionary and print the report."""
    registry = load_registry(args.registry) if args.registry else None

    builder = DictionaryBuilder(
        source_dir=args.source_dir,
        output_file=args.output,
        registry=registry,
        min_length=args.min_length,
        max_length=args.max_length,
        parse_workers=args.workers,
    )
    result = builder.build()

    print(result.statistics.format_report())

    if args.stats_csv:
        result.statistics.write_csv(args.stats_csv)
        print(f"Source statistics: {args.stats_csv}")

    return True


def run_score_lists(args) -> bool:
    """Score raw per-length word lists into JSON frequency files."""
    generator = FrequencyListGenerator(args.word_list_dir, args.output_dir)
    results = generator.generate(args.min_length, args.max_length)

    for result in results:
        if result.status != "generated":
            print(f"Warning: {result.input_path} not found, skipping...")
            continue
        print(f"Processing {result.length}-letter words...")
        print(f"  ✓ Generated {len(result.frequencies)} words")
        print(f"  ✓ Top 10: {', '.join(result.top_words)}")
        print(f"  ✓ Saved to {result.output_path}\n")

    generated = sum(1 for result in results if result.status == "generated")
    print(f"✓ Word frequency generation complete! ({generated}/{len(results)} lengths)")
    return True


def build_parser(config_defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Crossword Master Dictionary Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s build --source-dir word-lists --output master.dict
  %(prog)s score-lists --word-list-dir database
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", help="Write a detailed debug log to this file")
    parser.add_argument("--config", help="Path to a lexicon_config.txt file")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    build_parser_ = subparsers.add_parser(
        "build", help="Build the master dictionary (default command)"
    )
    build_parser_.add_argument(
        "--source-dir",
        default=config_defaults["source_dir"],
        help=f"Directory holding the source word lists (default: {config_defaults['source_dir']})",
    )
    build_parser_.add_argument(
        "--output",
        default=config_defaults["output"],
        help=f"Master dictionary path (default: {config_defaults['output']})",
    )
    build_parser_.add_argument(
        "--registry", help="JSON source registry (default: built-in registry)"
    )
    build_parser_.add_argument(
        "--min-length",
        type=int,
        default=config_defaults["min_length"],
        help=f"Minimum word length (default: {config_defaults['min_length']})",
    )
    build_parser_.add_argument(
        "--max-length",
        type=int,
        default=config_defaults["max_length"],
        help=f"Maximum word length (default: {config_defaults['max_length']})",
    )
    build_parser_.add_argument(
        "--workers",
        type=int,
        default=config_defaults["workers"],
        help=f"Parallel source parsers (default: {config_defaults['workers']})",
    )
    build_parser_.add_argument("--stats-csv", help="Also write per-source counters as CSV")

    score_parser = subparsers.add_parser(
        "score-lists", help="Score raw <n>_letter_words.txt lists into JSON frequency files"
    )
    score_parser.add_argument(
        "--word-list-dir",
        default=config_defaults["word_list_dir"],
        help=f"Directory with <n>_letter_words.txt files (default: {config_defaults['word_list_dir']})",
    )
    score_parser.add_argument(
        "--output-dir",
        default=config_defaults["frequency_output_dir"],
        help=f"Directory for <n>_letter_frequencies.json (default: {config_defaults['frequency_output_dir']})",
    )
    score_parser.add_argument(
        "--min-length", type=int, default=config_defaults["min_length"]
    )
    score_parser.add_argument(
        "--max-length", type=int, default=config_defaults["max_length"]
    )

    return parser


def _config_path(argv: List[str]) -> Optional[str]:
    for i, arg in enumerate(argv):
        if arg == "--config" and i + 1 < len(argv):
            return argv[i + 1]
        if arg.startswith("--config="):
            return arg.split("=", 1)[1]
    return None


def main(argv: Optional[List[str]] = None) -> bool:
    """Main CLI entry point. Returns True on success."""
    argv = list(sys.argv[1:] if argv is None else argv)

    # The config file supplies argparse defaults, so load it first
    config_path = _config_path(argv)
    if config_path:
        reload_config(config_path)

    parser = build_parser(get_config_defaults())
    args = parser.parse_args(argv)
    if not args.command:
        args = parser.parse_args(argv + ["build"])

    setup_logging(args.verbose, args.log_file)
    logging.info(f"COMMAND: {' '.join(sys.argv)}")
    logging.info(f"ARGUMENTS: {vars(args)}")

    try:
        if args.command == "build":
            return run_build(args)
        elif args.command == "score-lists":
            return run_score_lists(args)
        else:
            print(f"❌ Unknown command: {args.command}", file=sys.stderr)
            return False

    except LexiconError as e:
        print(f"❌ {e}", file=sys.stderr)
        logging.debug("Fatal build error", exc_info=True)
        return False
    except OSError as e:
        print(f"❌ I/O error: {e}", file=sys.stderr)
        logging.debug("Fatal I/O error", exc_info=True)
        return False
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user", file=sys.stderr)
        return False


def cli():
    """Console script entry point."""
    sys.exit(0 if main() else 1)


if __name__ == "__main__":
    cli()
