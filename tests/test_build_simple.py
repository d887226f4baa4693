"""
End-to-end test suite for the master dictionary build.

Covers the builder pipeline, the dictionary writer, build statistics,
frequency list generation, configuration loading and the command line.
"""

import json
import logging
import os
import random
import stat
import tempfile
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pandas as pd
import pytest

import build_master_dictionary
from crossword_lexicon.data.data_structure import (
    STATUS_LOADED,
    STATUS_NOT_FOUND,
    Entry,
    MasterDictionary,
    SourceDescriptor,
    SourceStats,
)
from crossword_lexicon.data.dictionary_builder import DictionaryBuilder
from crossword_lexicon.errors import (
    ConfigurationError,
    InvariantViolationError,
    OutputWriteError,
)
from crossword_lexicon.generate.frequency_generator import FrequencyListGenerator
from crossword_lexicon.output import dictionary_writer
from crossword_lexicon.output.dictionary_writer import (
    build_header,
    read_master_dictionary,
    validate_entries,
    write_master_dictionary,
)
from crossword_lexicon.output.statistics import (
    SOURCE_STATS_COLUMNS,
    DictionaryStatistics,
    sample_high_scoring,
    score_histogram,
    words_by_length,
)
from crossword_lexicon.utils.config_loader import ConfigLoader, reload_config

BUILD_DATE = date(2024, 3, 15)


@pytest.fixture
def workspace():
    """Temporary source and output directories."""
    with tempfile.TemporaryDirectory() as tmp:
        source_dir = os.path.join(tmp, "word-lists")
        output_dir = os.path.join(tmp, "out")
        os.makedirs(source_dir)
        os.makedirs(output_dir)
        yield {
            "root": tmp,
            "source_dir": source_dir,
            "output_file": os.path.join(output_dir, "master.dict"),
        }


def write_source(source_dir, name, content):
    with open(os.path.join(source_dir, name), "w", encoding="utf-8") as f:
        f.write(content)


def make_builder(workspace, registry, **kwargs):
    kwargs.setdefault("min_length", 2)
    kwargs.setdefault("max_length", 5)
    return DictionaryBuilder(
        source_dir=workspace["source_dir"],
        output_file=workspace["output_file"],
        registry=registry,
        regenerate_command="python build_master_dictionary.py",
        **kwargs,
    )


def read_records(path):
    return [entry.to_line() for entry in read_master_dictionary(path)]


def source(name, priority=1, scored=True):
    return SourceDescriptor(name, priority, f"{name} list", scored)


class TestDictionaryBuilder:
    """Test the full build pipeline."""

    def test_merge_across_two_sources(self, workspace):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\nDOG;60\n")
        write_source(workspace["source_dir"], "s2.dict", "CAT;70\nBIRD;50\n")

        result = make_builder(workspace, [source("s1.dict"), source("s2.dict", 2)]).build()

        assert read_records(workspace["output_file"]) == ["CAT;70", "DOG;60", "BIRD;50"]
        s1, s2 = result.source_stats
        assert (s1.new_words, s1.upgraded_scores, s1.kept_existing) == (2, 0, 0)
        assert (s2.new_words, s2.upgraded_scores, s2.kept_existing) == (1, 1, 0)

    def test_normalization_bounds(self, workspace):
        write_source(workspace["source_dir"], "s.dict", "O'Hare;80\n")

        for max_length, expected in [(6, ["OHARE;80"]), (5, ["OHARE;80"]), (4, [])]:
            make_builder(workspace, [source("s.dict")], max_length=max_length).build()
            assert read_records(workspace["output_file"]) == expected

    def test_comments_and_blanks(self, workspace):
        write_source(workspace["source_dir"], "s.dict", "# header\n\nAPPLE;50\n")

        result = make_builder(workspace, [source("s.dict")]).build()

        assert read_records(workspace["output_file"]) == ["APPLE;50"]
        assert result.source_stats[0].parsed == 1
        assert result.source_stats[0].skipped == 0

    def test_unscored_source(self, workspace):
        write_source(workspace["source_dir"], "raw.txt", "the\n")

        make_builder(workspace, [source("raw.txt", scored=False)]).build()

        assert read_records(workspace["output_file"]) == ["THE;100"]

    def test_duplicate_lines_order_independent(self, workspace):
        write_source(workspace["source_dir"], "s.dict", "FOO;30\nFOO;80\n")
        make_builder(workspace, [source("s.dict")]).build()
        forward = read_records(workspace["output_file"])

        write_source(workspace["source_dir"], "s.dict", "FOO;80\nFOO;30\n")
        make_builder(workspace, [source("s.dict")]).build()

        assert forward == read_records(workspace["output_file"]) == ["FOO;80"]

    def test_missing_source_reported(self, workspace):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\n")
        registry = [source("s1.dict"), source("missing.dict", 2)]

        result = make_builder(workspace, registry).build()

        assert [s.status for s in result.source_stats] == [STATUS_LOADED, STATUS_NOT_FOUND]
        assert read_records(workspace["output_file"]) == ["CAT;40"]
        assert "SKIP: not found" in result.statistics.format_report()

    def test_all_sources_missing_writes_empty_dictionary(self, workspace):
        result = make_builder(workspace, [source("missing.dict")]).build(BUILD_DATE)

        assert result.entries == []
        with open(workspace["output_file"], encoding="utf-8") as f:
            assert "# Words: 0 (lengths 2-5)\n" in f.read()

    def test_rebuild_is_byte_identical(self, workspace):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\nDOG;60\nBIRD;10\n")
        write_source(workspace["source_dir"], "raw.txt", "the\nqi\nax\n")
        registry = [source("s1.dict"), source("raw.txt", 2, scored=False)]

        make_builder(workspace, registry).build(BUILD_DATE)
        with open(workspace["output_file"], "rb") as f:
            first = f.read()
        make_builder(workspace, registry).build(BUILD_DATE)
        with open(workspace["output_file"], "rb") as f:
            second = f.read()

        assert first == second
        assert b"\r" not in first
        assert first.endswith(b"\n")

    def test_rebuild_identical_apart_from_date(self, workspace):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\nDOG;60\n")

        def content_without_date():
            make_builder(workspace, [source("s1.dict")]).build()
            with open(workspace["output_file"], encoding="utf-8") as f:
                return [
                    line
                    for line in f
                    if not line.startswith(dictionary_writer.GENERATED_PREFIX)
                ]

        assert content_without_date() == content_without_date()

    def test_registry_order_does_not_change_records(self, workspace):
        rng = random.Random(42)
        words = ["CAT", "DOG", "EMU", "BIRD", "OHARE", "AX", "ZEBRA"]
        registry = []
        for i in range(5):
            lines = [f"{w};{rng.randint(1, 100)}" for w in rng.sample(words, 4)]
            write_source(workspace["source_dir"], f"s{i}.dict", "\n".join(lines) + "\n")
            registry.append(source(f"s{i}.dict", i + 1))

        make_builder(workspace, registry).build()
        forward = read_records(workspace["output_file"])
        make_builder(workspace, list(reversed(registry))).build()

        assert read_records(workspace["output_file"]) == forward

    def test_output_score_is_max_over_sources(self, workspace):
        rng = random.Random(7)
        words = ["CAT", "DOG", "EMU", "BIRD", "OHARE"]
        expected = {}
        registry = []
        for i in range(6):
            lines = []
            for word in rng.sample(words, 3):
                score = rng.randint(1, 100)
                expected[word] = max(expected.get(word, 0), score)
                lines.append(f"{word.lower()};{score}")
            write_source(workspace["source_dir"], f"s{i}.dict", "\n".join(lines))
            registry.append(source(f"s{i}.dict"))

        result = make_builder(workspace, registry).build()

        assert result.master.scores == expected

    def test_parallel_parsing_matches_sequential(self, workspace):
        registry = []
        for i in range(6):
            write_source(
                workspace["source_dir"], f"s{i}.dict", f"CAT;{10 * i + 5}\nW{i}X;50\n"
            )
            registry.append(source(f"s{i}.dict"))
        registry.append(source("missing.dict"))

        sequential = make_builder(workspace, registry, parse_workers=1).build(BUILD_DATE)
        with open(workspace["output_file"], "rb") as f:
            sequential_bytes = f.read()
        parallel = make_builder(workspace, registry, parse_workers=4).build(BUILD_DATE)
        with open(workspace["output_file"], "rb") as f:
            parallel_bytes = f.read()

        assert sequential_bytes == parallel_bytes
        assert sequential.source_stats == parallel.source_stats

    def test_missing_source_dir(self, workspace):
        builder = DictionaryBuilder(
            source_dir=os.path.join(workspace["root"], "nope"),
            output_file=workspace["output_file"],
            registry=[source("s.dict")],
        )
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_missing_output_dir(self, workspace):
        builder = DictionaryBuilder(
            source_dir=workspace["source_dir"],
            output_file=os.path.join(workspace["root"], "nope", "master.dict"),
            registry=[source("s.dict")],
        )
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_invalid_length_bounds(self, workspace):
        with pytest.raises(ConfigurationError):
            make_builder(workspace, [source("s.dict")], min_length=5, max_length=2).build()

    def test_empty_registry(self, workspace):
        with pytest.raises(ConfigurationError):
            make_builder(workspace, []).build()


class TestDictionaryWriter:
    """Test the header, invariant checks and atomic write."""

    def test_header_lines(self):
        header = build_header(
            1234567, 2, 5, ["a.dict", "b.txt"], "python build_master_dictionary.py", BUILD_DATE
        )
        assert header == [
            "# Crossword Master Dictionary",
            "# Generated: 2024-03-15",
            "# Format: WORD;SCORE (1-100)",
            "# Words: 1,234,567 (lengths 2-5)",
            "#",
            "# Sources: a.dict, b.txt",
            "#",
            "# Merge strategy: highest score wins across all sources",
            "# To regenerate: python build_master_dictionary.py",
            "#",
        ]

    def test_written_file_layout(self, workspace):
        master = MasterDictionary({"DOG": 60, "CAT": 70, "BIRD": 50}, 2, 5)
        write_master_dictionary(
            master, workspace["output_file"], ["s1.dict"], "cmd", BUILD_DATE
        )

        with open(workspace["output_file"], encoding="utf-8", newline="") as f:
            lines = f.read().split("\n")

        assert lines[0] == "# Crossword Master Dictionary"
        assert lines[3] == "# Words: 3 (lengths 2-5)"
        assert lines[10:] == ["CAT;70", "DOG;60", "BIRD;50", ""]

    @pytest.mark.parametrize(
        "entries",
        [
            [Entry("cat", 50)],
            [Entry("CAT", 0)],
            [Entry("CAT", 101)],
            [Entry("CAT", 5.5)],
            [Entry("TOOLONG", 50)],
            [Entry("DOG", 50), Entry("CAT", 50)],
            [Entry("CAT", 50), Entry("CAT", 60)],
            [Entry("BIRD", 50), Entry("CAT", 50)],
        ],
    )
    def test_invariant_violations(self, entries):
        with pytest.raises(InvariantViolationError):
            validate_entries(entries, 2, 5)

    def test_valid_entries_pass(self):
        validate_entries([Entry("AX", 1), Entry("CAT", 100), Entry("BIRD", 50)], 2, 5)

    def test_invalid_entry_never_written(self, workspace):
        master = MasterDictionary({"CAT": 0}, 2, 5)
        with pytest.raises(InvariantViolationError):
            write_master_dictionary(master, workspace["output_file"], [], "cmd")
        assert not os.path.exists(workspace["output_file"])

    def test_failed_rename_leaves_previous_file(self, workspace):
        with open(workspace["output_file"], "w", encoding="utf-8") as f:
            f.write("previous\n")
        master = MasterDictionary({"CAT": 70}, 2, 5)

        with patch.object(
            dictionary_writer.os, "replace", side_effect=OSError("disk full")
        ):
            with pytest.raises(OutputWriteError):
                write_master_dictionary(master, workspace["output_file"], [], "cmd")

        output_dir = os.path.dirname(workspace["output_file"])
        assert os.listdir(output_dir) == ["master.dict"]
        with open(workspace["output_file"], encoding="utf-8") as f:
            assert f.read() == "previous\n"

    @pytest.mark.parametrize("mode", [0o644, 0o640])
    def test_rebuild_keeps_file_mode(self, workspace, mode):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\n")
        with open(workspace["output_file"], "w", encoding="utf-8") as f:
            f.write("previous\n")
        os.chmod(workspace["output_file"], mode)

        make_builder(workspace, [source("s1.dict")]).build()

        assert stat.S_IMODE(os.stat(workspace["output_file"]).st_mode) == mode
        assert read_records(workspace["output_file"]) == ["CAT;40"]

    def test_new_file_follows_umask(self, workspace):
        old_umask = os.umask(0o022)
        try:
            write_master_dictionary(
                MasterDictionary({"CAT": 70}, 2, 5), workspace["output_file"], [], "cmd"
            )
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(os.stat(workspace["output_file"]).st_mode) == 0o644


class TestDictionaryStatistics:
    """Test the build statistics and report."""

    def entries(self):
        return [
            Entry("AX", 10),
            Entry("QI", 11),
            Entry("CAT", 80),
            Entry("DOG", 75),
            Entry("BIRD", 100),
            Entry("OHARE", 50),
        ]

    def test_words_by_length(self):
        assert words_by_length(self.entries(), 2, 5) == {2: 2, 3: 2, 4: 1, 5: 1}

    def test_score_histogram(self):
        assert score_histogram(self.entries()) == {
            "1-10": 1,
            "11-25": 1,
            "26-50": 1,
            "51-75": 1,
            "76-100": 2,
        }

    def test_empty_histogram(self):
        assert sum(score_histogram([]).values()) == 0

    def test_samples(self):
        samples = sample_high_scoring(self.entries(), 2, 5, threshold=75, per_length=1)
        assert samples[2] == []
        assert samples[3] == [Entry("CAT", 80)]
        assert samples[4] == [Entry("BIRD", 100)]

    def test_report_sections(self, workspace):
        stats = [
            SourceStats("s1.dict", "First", 1, parsed=6, skipped=2, qualifying=6, new_words=6),
            SourceStats("gone.dict", "Gone", 2, status=STATUS_NOT_FOUND),
        ]
        statistics = DictionaryStatistics(stats, self.entries(), 2, 5, elapsed_seconds=1.5)
        report = statistics.format_report()

        assert report.startswith("=== Building Crossword Master Dictionary ===")
        assert "=== Master Dictionary Statistics ===" in report
        assert "Total words: 6" in report
        assert "Skipped (invalid format): 2" in report
        assert "SKIP: not found" in report
        assert "3-letter: CAT(80), DOG(75)" in report
        assert "Completed in 1.50s" in report

    def test_source_stats_csv(self, workspace):
        stats = [
            SourceStats("s1.dict", "First", 1, parsed=3, qualifying=3, new_words=3),
            SourceStats("gone.dict", "Gone", 2, status=STATUS_NOT_FOUND),
        ]
        csv_path = os.path.join(workspace["root"], "reports", "stats.csv")
        DictionaryStatistics(stats, [], 2, 5).write_csv(csv_path)

        frame = pd.read_csv(csv_path)
        assert list(frame.columns) == SOURCE_STATS_COLUMNS
        assert frame["file"].tolist() == ["s1.dict", "gone.dict"]
        assert frame["new_words"].tolist() == [3, 0]
        assert frame["status"].tolist() == [STATUS_LOADED, STATUS_NOT_FOUND]


class TestFrequencyListGenerator:
    """Test per-length JSON frequency list generation."""

    def test_generate(self, workspace):
        word_dir = workspace["root"]
        output_dir = os.path.join(word_dir, "frequencies")
        with open(os.path.join(word_dir, "3_letter_words.txt"), "w", encoding="utf-8") as f:
            f.write("the\ncat\ndog\nThe\nab\n# comment\n")

        results = FrequencyListGenerator(word_dir, output_dir).generate(2, 3)

        assert [r.status for r in results] == ["not found", "generated"]
        generated = results[1]
        assert generated.top_words[0] == "THE"
        assert sorted(generated.top_words) == ["CAT", "DOG", "THE"]

        with open(generated.output_path, encoding="utf-8") as f:
            data = json.load(f)
        assert data[0] == {"word": "THE", "frequency": 100}
        frequencies = [item["frequency"] for item in data]
        assert frequencies == sorted(frequencies, reverse=True)
        assert not os.path.exists(os.path.join(output_dir, "2_letter_frequencies.json"))

    def test_byte_order_mark_keeps_first_word(self, workspace):
        word_dir = workspace["root"]
        with open(os.path.join(word_dir, "3_letter_words.txt"), "wb") as f:
            f.write("\ufeffcat\ndog\n".encode("utf-8"))

        generator = FrequencyListGenerator(word_dir, os.path.join(word_dir, "frequencies"))
        result = generator.generate_for_length(3)

        assert sorted(result.top_words) == ["CAT", "DOG"]


class TestConfigLoader:
    """Test configuration loading."""

    def test_explicit_config_file(self, workspace):
        config_path = os.path.join(workspace["root"], "custom_config.txt")
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(
                "# test config\n"
                "SOURCE_DIR=words\n"
                "MAX_WORD_LENGTH=6\n"
                "PARSE_WORKERS=4\n"
                "SAMPLE_SCORE_THRESHOLD=80\n"
                "STRICT=true\n"
                "not a setting\n"
            )

        config = ConfigLoader(config_path)
        build = config.get_build_config()

        assert build["source_dir"] == Path(workspace["root"]) / "words"
        assert build["max_length"] == 6
        assert build["min_length"] == 2
        assert build["parse_workers"] == 4
        assert build["sample_threshold"] == 80
        assert config.get_bool("STRICT") is True
        assert config.get("OUTPUT_FILE") == "database/crossword-master.dict"

    def test_missing_config_uses_defaults(self, workspace):
        config = ConfigLoader(os.path.join(workspace["root"], "missing.txt"))
        assert config.config_path is None
        assert config.get_int("MAX_WORD_LENGTH") == 5
        assert config.get_cli_defaults()["workers"] == 1


class TestCommandLine:
    """Test the command line entry point."""

    @pytest.fixture(autouse=True)
    def restore_config(self):
        yield
        reload_config()
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    def test_build_command(self, workspace, capsys):
        write_source(workspace["source_dir"], "s1.dict", "CAT;40\nDOG;60\n")
        registry_path = os.path.join(workspace["root"], "registry.json")
        with open(registry_path, "w", encoding="utf-8") as f:
            json.dump([{"file": "s1.dict", "description": "First list"}], f)
        csv_path = os.path.join(workspace["root"], "stats.csv")

        success = build_master_dictionary.main(
            [
                "build",
                "--source-dir",
                workspace["source_dir"],
                "--output",
                workspace["output_file"],
                "--registry",
                registry_path,
                "--stats-csv",
                csv_path,
            ]
        )

        assert success is True
        out = capsys.readouterr().out
        assert "=== Building Crossword Master Dictionary ===" in out
        assert "Total words: 2" in out
        assert read_records(workspace["output_file"]) == ["CAT;40", "DOG;60"]
        assert os.path.exists(csv_path)

    def test_default_command_from_config(self, workspace, capsys):
        write_source(workspace["source_dir"], "xwordlist.dict.txt", "CAT;40\n")
        config_path = os.path.join(workspace["root"], "lexicon_config.txt")
        with open(config_path, "w", encoding="utf-8") as f:
            f.write("SOURCE_DIR=word-lists\nOUTPUT_FILE=out/master.dict\n")

        # No subcommand: build with the built-in registry and configured paths
        success = build_master_dictionary.main(["--config", config_path])

        assert success is True
        out = capsys.readouterr().out
        assert "SKIP: not found" in out
        assert "Total words: 1" in out
        assert read_records(workspace["output_file"]) == ["CAT;40"]

    def test_build_fails_on_missing_source_dir(self, workspace, capsys):
        success = build_master_dictionary.main(
            [
                "build",
                "--source-dir",
                os.path.join(workspace["root"], "nope"),
                "--output",
                workspace["output_file"],
            ]
        )

        assert success is False
        assert "Source directory not found" in capsys.readouterr().err

    def test_score_lists_command(self, workspace, capsys):
        with open(
            os.path.join(workspace["root"], "2_letter_words.txt"), "w", encoding="utf-8"
        ) as f:
            f.write("to\nqi\nax\n")
        output_dir = os.path.join(workspace["root"], "frequencies")

        success = build_master_dictionary.main(
            [
                "score-lists",
                "--word-list-dir",
                workspace["root"],
                "--output-dir",
                output_dir,
                "--min-length",
                "2",
                "--max-length",
                "3",
            ]
        )

        assert success is True
        out = capsys.readouterr().out
        assert "Generated 3 words" in out
        assert "(1/2 lengths)" in out
        assert os.path.exists(os.path.join(output_dir, "2_letter_frequencies.json"))


if __name__ == "__main__":
    pytest.main([__file__])
