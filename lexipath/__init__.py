"""LexiPath - minimum-cost word transformation search.

Find the cheapest sequence of insertions, deletions, substitutions and anagram
jumps that turns one dictionary word into another.
"""

from lexipath.core import ConfigurationError, CostModel, SearchQuery, load_instruction
from lexipath.data import AnagramIndex, DictionaryIndex
from lexipath.search import SearchEngine, SearchStats, find_minimum_cost, solve_query
from lexipath.utils.constants import Constants
from lexipath.utils.logging import setup_logger

UNREACHABLE = Constants.UNREACHABLE

__version__ = "0.1.0"
__all__ = [
    "AnagramIndex",
    "ConfigurationError",
    "CostModel",
    "DictionaryIndex",
    "SearchEngine",
    "SearchQuery",
    "SearchStats",
    "UNREACHABLE",
    "find_minimum_cost",
    "load_instruction",
    "setup_logger",
    "solve_query",
]
