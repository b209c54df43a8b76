"""Unit tests for the indexed frontier and explored map.

Each test has a single assertion.
"""

from lexipath.core import SearchNode
from lexipath.search import ExploredMap, Frontier


def _frontier(*nodes: SearchNode) -> Frontier:
    frontier = Frontier()
    for node in nodes:
        frontier.push(node)
    return frontier


class TestFrontierOrdering:
    """Test pop order of the frontier."""

    def test_pops_lowest_priority_first(self) -> None:
        """The node with the smallest priority is popped first."""
        frontier = _frontier(
            SearchNode("bats", 1, 5), SearchNode("cats", 0, 2), SearchNode("rats", 2, 9)
        )
        assert frontier.pop_min().word == "cats"

    def test_pops_in_ascending_priority(self) -> None:
        """Repeated pops come out in ascending priority."""
        frontier = _frontier(*(SearchNode(f"w{p:03d}", 0, p) for p in (7, 3, 9, 1, 4, 8, 2)))
        priorities = [frontier.pop_min().priority for _ in range(len(frontier))]
        assert priorities == [1, 2, 3, 4, 7, 8, 9]

    def test_breaks_ties_lexicographically(self) -> None:
        """Equal priorities pop in word order."""
        frontier = _frontier(SearchNode("rats", 0, 3), SearchNode("bats", 0, 3))
        assert frontier.pop_min().word == "bats"

    def test_pop_on_empty_returns_none(self) -> None:
        """An exhausted frontier signals with None."""
        assert Frontier().pop_min() is None

    def test_pop_removes_word(self) -> None:
        """A popped word is no longer queued."""
        frontier = _frontier(SearchNode("cats", 0, 1))
        frontier.pop_min()
        assert "cats" not in frontier


class TestFrontierUpsert:
    """Test decrease-key-or-ignore behavior."""

    def test_inserts_new_word(self) -> None:
        """An unseen word is queued."""
        frontier = Frontier()
        frontier.upsert(SearchNode("cats", 1, 2), ExploredMap())
        assert "cats" in frontier

    def test_drops_node_not_cheaper_than_explored(self) -> None:
        """A node whose cost is no better than the explored cost is dropped."""
        explored = ExploredMap()
        explored.record("cats", 3)
        frontier = Frontier()
        frontier.upsert(SearchNode("cats", 3, 3), explored)
        assert "cats" not in frontier

    def test_accepts_node_cheaper_than_explored(self) -> None:
        """A node strictly cheaper than the explored cost is queued."""
        explored = ExploredMap()
        explored.record("cats", 3)
        frontier = Frontier()
        assert frontier.upsert(SearchNode("cats", 2, 2), explored)

    def test_replaces_queued_node_with_lower_priority(self) -> None:
        """A lower-priority node for a queued word replaces it."""
        frontier = _frontier(SearchNode("cats", 5, 9))
        frontier.upsert(SearchNode("cats", 2, 4), ExploredMap())
        assert frontier.get("cats").cost == 2

    def test_keeps_queued_node_with_lower_priority(self) -> None:
        """A worse node for a queued word is ignored."""
        frontier = _frontier(SearchNode("cats", 2, 4))
        frontier.upsert(SearchNode("cats", 5, 9), ExploredMap())
        assert frontier.get("cats").cost == 2

    def test_keeps_queued_node_on_equal_priority(self) -> None:
        """An equal-priority node does not replace the queued one."""
        frontier = _frontier(SearchNode("cats", 2, 4))
        assert not frontier.upsert(SearchNode("cats", 3, 4), ExploredMap())

    def test_holds_one_node_per_word(self) -> None:
        """Upserting the same word twice leaves one entry."""
        frontier = Frontier()
        frontier.upsert(SearchNode("cats", 5, 9), ExploredMap())
        frontier.upsert(SearchNode("cats", 2, 4), ExploredMap())
        assert len(frontier) == 1

    def test_replaced_node_moves_to_front(self) -> None:
        """Decreasing a node's priority reorders the heap."""
        frontier = _frontier(
            SearchNode("bats", 0, 3), SearchNode("rats", 0, 5), SearchNode("cats", 0, 8)
        )
        frontier.upsert(SearchNode("cats", 0, 1), ExploredMap())
        assert frontier.pop_min().word == "cats"


class TestExploredMap:
    """Test cost memory of the explored map."""

    def test_records_first_cost(self) -> None:
        """The first recorded cost is stored."""
        explored = ExploredMap()
        explored.record("cats", 4)
        assert explored.get("cats") == 4

    def test_keeps_lower_cost(self) -> None:
        """A higher cost never overwrites a lower one."""
        explored = ExploredMap()
        explored.record("cats", 2)
        explored.record("cats", 4)
        assert explored.get("cats") == 2

    def test_improves_to_lower_cost(self) -> None:
        """A lower cost replaces a higher one."""
        explored = ExploredMap()
        explored.record("cats", 4)
        explored.record("cats", 2)
        assert explored.get("cats") == 2

    def test_missing_word_returns_default(self) -> None:
        """Unknown words return the default."""
        assert ExploredMap().get("cats", -1) == -1
