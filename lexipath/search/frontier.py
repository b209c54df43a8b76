"""Indexed priority queue of search nodes with decrease-key."""

from lexipath.core.types import SearchNode
from lexipath.search.explored import ExploredMap


class Frontier:
    """Binary min-heap of search nodes keyed by word.

    Holds at most one node per word. A map from word to heap position gives
    logarithmic replacement of a queued node. Nodes are ordered by priority,
    and equal priorities are ordered lexicographically by word.
    """

    def __init__(self) -> None:
        self._heap: list[SearchNode] = []
        self._positions: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, word: object) -> bool:
        return word in self._positions

    def get(self, word: str) -> SearchNode | None:
        """Return the queued node for `word`, if any."""
        position = self._positions.get(word)
        if position is None:
            return None
        return self._heap[position]

    def push(self, node: SearchNode) -> None:
        """Queue `node`, replacing any node already queued for the same word."""
        position = self._positions.get(node.word)
        if position is not None:
            self._replace(position, node)
            return
        self._heap.append(node)
        self._positions[node.word] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def pop_min(self) -> SearchNode | None:
        """Remove and return the lowest-priority node, or None when empty."""
        if not self._heap:
            return None
        best = self._heap[0]
        last = self._heap.pop()
        del self._positions[best.word]
        if self._heap:
            self._heap[0] = last
            self._positions[last.word] = 0
            self._sift_down(0)
        return best

    def upsert(self, node: SearchNode, explored: ExploredMap) -> bool:
        """Queue `node` unless something at least as good is already known.

        The node is dropped when the explored map already holds a cost for its
        word that is no greater than the node's cost. If the word is queued,
        the queued node is replaced only when `node` has a strictly lower
        priority.

        Returns:
            True if the frontier changed, False if the node was dropped
        """
        known = explored.get(node.word)
        if known is not None and known <= node.cost:
            return False

        position = self._positions.get(node.word)
        if position is None:
            self.push(node)
            return True
        if self._heap[position].priority > node.priority:
            self._replace(position, node)
            return True
        return False

    def _replace(self, position: int, node: SearchNode) -> None:
        self._heap[position] = node
        self._sift_up(position)
        self._sift_down(self._positions[node.word])

    @staticmethod
    def _key(node: SearchNode) -> tuple[int, str]:
        return (node.priority, node.word)

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._positions[heap[i].word] = i
        self._positions[heap[j].word] = j

    def _sift_up(self, position: int) -> None:
        while position > 0:
            parent = (position - 1) // 2
            if self._key(self._heap[position]) >= self._key(self._heap[parent]):
                break
            self._swap(position, parent)
            position = parent

    def _sift_down(self, position: int) -> None:
        size = len(self._heap)
        while True:
            smallest = position
            for child in (2 * position + 1, 2 * position + 2):
                if child < size and self._key(self._heap[child]) < self._key(self._heap[smallest]):
                    smallest = child
            if smallest == position:
                return
            self._swap(position, smallest)
            position = smallest
