"""Best-first search for the cheapest chain of word edits."""

from __future__ import annotations

from collections.abc import Iterable
import time

from loguru import logger

from lexipath.core import (
    CostModel,
    SearchNode,
    SearchQuery,
    SearchState,
    distance,
    generate_deletions,
    generate_insertions,
    generate_substitutions,
)
from lexipath.data import DictionaryIndex, is_anagram_of
from lexipath.search.explored import ExploredMap
from lexipath.search.frontier import Frontier
from lexipath.search.stats import SearchStats
from lexipath.utils import Constants


class _QueryContext:
    """Everything owned by one in-flight query.

    Tallies are plain attributes for the hot loop and are copied into
    SearchStats when the query ends.
    """

    __slots__ = (
        "target",
        "costs",
        "explored",
        "frontier",
        "estimates",
        "expanded",
        "generated",
        "accepted",
        "queued",
    )

    def __init__(self, target: str, costs: CostModel) -> None:
        self.target = target
        self.costs = costs
        self.explored = ExploredMap()
        self.frontier = Frontier()
        self.estimates: dict[str, int] = {}
        self.expanded = 0
        self.generated = 0
        self.accepted = 0
        self.queued = 0

    def estimate(self, word: str) -> int:
        """Heuristic distance from `word` to this query's target, cached."""
        estimate = self.estimates.get(word)
        if estimate is None:
            estimate = distance(word, self.target, self.costs)
            self.estimates[word] = estimate
        return estimate


class SearchEngine:
    """A*-style search over dictionary words using weighted edit costs.

    The cost model and dictionary are fixed at construction. Every call to
    `find_minimum_cost` builds its own frontier, explored map and heuristic
    cache, so queries are independent and may share one engine.
    """

    def __init__(
        self,
        costs: CostModel,
        dictionary: DictionaryIndex,
        max_expansions: int | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            costs: Edit operation costs
            dictionary: Read-only index of valid words
            max_expansions: Optional cap on nodes expanded per query; None
                searches until the frontier is exhausted
        """
        self.costs = costs
        self.dictionary = dictionary
        self.max_expansions = max_expansions
        self.state = SearchState.READY
        self.last_stats: SearchStats | None = None

    def find_minimum_cost(self, origin: str, target: str) -> int:
        """Return the cheapest total cost from `origin` to `target`.

        Returns `Constants.UNREACHABLE` when either word is not in the
        dictionary or the target cannot be reached.
        """
        start_time = time.time()
        context = _QueryContext(target, self.costs)
        capped = False

        if origin not in self.dictionary or target not in self.dictionary:
            logger.debug(f"Skipping search: '{origin}' or '{target}' is not a dictionary word")
        else:
            self.state = SearchState.RUNNING
            capped = self._run(origin, context)

        self.state = SearchState.DONE
        result = context.explored.get(target, Constants.UNREACHABLE)
        stats = SearchStats(
            origin=origin,
            target=target,
            result=result,
            expanded=context.expanded,
            generated=context.generated,
            accepted=context.accepted,
            queued=context.queued,
            explored=len(context.explored),
            capped=capped,
            elapsed_time=time.time() - start_time,
        )
        self.last_stats = stats
        logger.debug(
            f"{origin} -> {target}: cost {result}, expanded {stats.expanded:,}, "
            f"queued {stats.queued:,}/{stats.generated:,} candidates "
            f"in {stats.elapsed_time:.3f}s"
        )
        return result

    def _run(self, origin: str, context: _QueryContext) -> bool:
        """Expand nodes until the frontier is empty. Returns True if capped."""
        frontier = context.frontier
        frontier.push(SearchNode(origin, 0, context.estimate(origin)))

        while frontier:
            if self.max_expansions is not None and context.expanded >= self.max_expansions:
                logger.warning(
                    f"⚠️  Search {origin} -> {context.target} stopped after "
                    f"{context.expanded:,} expansions (max_expansions)"
                )
                return True

            node = frontier.pop_min()
            context.explored.record(node.word, node.cost)
            context.expanded += 1
            self._expand(node, context)
        return False

    def _expand(self, node: SearchNode, context: _QueryContext) -> None:
        word = node.word
        target = context.target
        edits: tuple[tuple[int, Iterable[str]], ...] = (
            (self.costs.insert, generate_insertions(word)),
            (self.costs.delete, generate_deletions(word)),
            (self.costs.substitute, generate_substitutions(word)),
        )
        for operation_cost, candidates in edits:
            cost = node.cost + operation_cost
            for candidate in candidates:
                context.generated += 1
                if self._accepts(candidate, cost, context):
                    context.accepted += 1
                    self._offer(candidate, cost, context.estimate(candidate), context)

        cost = node.cost + self.costs.anagram
        if is_anagram_of(word, target):
            context.generated += 1
            if self._accepts(target, cost, context):
                context.accepted += 1
                self._offer(target, cost, 0, context)
            return

        # The current word is re-offered, scored against each alternate anagram
        for alternate in self.dictionary.anagrams.alternates(word):
            context.generated += 1
            if self._accepts(word, cost, context):
                context.accepted += 1
                estimate = distance(alternate, target, self.costs)
                self._offer(word, cost, estimate, context)

    def _accepts(self, candidate: str, cost: int, context: _QueryContext) -> bool:
        if not self.dictionary.is_valid_state(candidate):
            return False
        best = context.explored.get(context.target)
        return best is None or cost <= best

    @staticmethod
    def _offer(word: str, cost: int, estimate: int, context: _QueryContext) -> None:
        node = SearchNode(word, cost, cost + estimate)
        if context.frontier.upsert(node, context.explored):
            context.queued += 1


def find_minimum_cost(
    costs: CostModel,
    dictionary: DictionaryIndex,
    origin: str,
    target: str,
    max_expansions: int | None = None,
) -> int:
    """Minimum total edit cost from `origin` to `target`, or -1 if unreachable."""
    return SearchEngine(costs, dictionary, max_expansions).find_minimum_cost(origin, target)


def solve_query(
    query: SearchQuery, dictionary: DictionaryIndex, max_expansions: int | None = None
) -> int:
    """Answer a parsed instruction against `dictionary`."""
    return find_minimum_cost(query.costs, dictionary, query.origin, query.target, max_expansions)
