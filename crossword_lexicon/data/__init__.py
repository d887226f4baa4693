"""
Source ingestion and merging for the crossword master dictionary.

This package turns registered source word lists into per-source word maps
(line_parser, source_loader), merges them under the "highest score wins"
policy (merger) and orchestrates a full build (dictionary_builder).
"""
