"""Core domain logic for LexiPath."""

from .config import Config, SearchQuery, load_config, load_instruction, parse_instruction
from .costs import CostModel
from .edits import generate_deletions, generate_insertions, generate_substitutions
from .errors import ConfigurationError
from .heuristic import distance
from .types import SearchNode, SearchState

__all__ = [
    "Config",
    "ConfigurationError",
    "CostModel",
    "SearchNode",
    "SearchQuery",
    "SearchState",
    "distance",
    "generate_deletions",
    "generate_insertions",
    "generate_substitutions",
    "load_config",
    "load_instruction",
    "parse_instruction",
]
