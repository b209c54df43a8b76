"""Type definitions for LexiPath."""

from dataclasses import dataclass
from enum import Enum


class SearchState(Enum):
    """Lifecycle of a search engine."""

    READY = "ready"  # Constructed, no query run yet
    RUNNING = "running"  # Processing the frontier
    DONE = "done"  # Frontier exhausted or expansion cap reached


@dataclass(slots=True)
class SearchNode:
    """A candidate word with its accumulated cost and frontier priority."""

    word: str
    cost: int
    priority: int  # cost + heuristic estimate to the target
