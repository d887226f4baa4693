"""
Output stage: atomic master dictionary writer and build statistics report.
"""

from .dictionary_writer import write_master_dictionary, read_master_dictionary
from .statistics import DictionaryStatistics

__all__ = ["write_master_dictionary", "read_master_dictionary", "DictionaryStatistics"]
