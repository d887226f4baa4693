"""
Crossword Lexicon: Master Dictionary Builder

A batch pipeline that merges heterogeneous crossword word lists into a single
compact, ranked lexicon of short words (2-5 letters by default) scored 1-100,
suitable for feeding a crossword fill engine.

Main Components:
- data: line parsing, source registry, per-source loading and cross-source merging
- utils: configuration, word normalization and the heuristic frequency scorer
- output: atomic master dictionary writer and statistics report
- generate: per-length frequency list generation for raw word lists

Quick Start:
    from crossword_lexicon.data.dictionary_builder import DictionaryBuilder

    builder = DictionaryBuilder(source_dir="word-lists", output_file="master.dict")
    result = builder.build()
    print(result.statistics.format_report())
"""

__version__ = "1.0.0"
