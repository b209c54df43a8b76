"""Search engine and its frontier and explored-set structures."""

from lexipath.search.engine import SearchEngine, find_minimum_cost, solve_query
from lexipath.search.explored import ExploredMap
from lexipath.search.frontier import Frontier
from lexipath.search.stats import SearchStats

__all__ = [
    "ExploredMap",
    "Frontier",
    "SearchEngine",
    "SearchStats",
    "find_minimum_cost",
    "solve_query",
]
