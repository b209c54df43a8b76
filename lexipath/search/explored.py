"""Closed set with cost memory for a single query."""


class ExploredMap:
    """Best known accumulated cost per visited word.

    Values only ever decrease and entries are never removed.
    """

    def __init__(self) -> None:
        self._costs: dict[str, int] = {}

    def record(self, word: str, cost: int) -> int:
        """Store `cost` for `word` if it improves on the known cost.

        Returns:
            The best known cost for `word` after the update
        """
        known = self._costs.get(word)
        if known is None or cost < known:
            self._costs[word] = cost
            return cost
        return known

    def get(self, word: str, default: int | None = None) -> int | None:
        return self._costs.get(word, default)

    def __contains__(self, word: object) -> bool:
        return word in self._costs

    def __len__(self) -> int:
        return len(self._costs)
