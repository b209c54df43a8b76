"""Anagram signature index over a fixed set of words."""

from collections import Counter, defaultdict
from collections.abc import Iterable


def signature(word: str) -> str:
    """Canonical sorted-character signature shared by all anagrams of `word`."""
    return "".join(sorted(word))


def is_anagram_of(first: str, second: str) -> bool:
    """Return True if both strings have identical character multisets.

    Works for any strings, dictionary words or not.
    """
    return len(first) == len(second) and Counter(first) == Counter(second)


class AnagramIndex:
    """Read-only mapping from signature to the words sharing it."""

    def __init__(self, words: Iterable[str]) -> None:
        buckets: dict[str, set[str]] = defaultdict(set)
        for word in words:
            buckets[signature(word)].add(word)
        self._buckets: dict[str, frozenset[str]] = {
            key: frozenset(members) for key, members in buckets.items()
        }

    def bucket_for(self, word: str) -> frozenset[str]:
        """Return all indexed words with the same signature as `word`."""
        return self._buckets.get(signature(word), frozenset())

    def alternates(self, word: str) -> list[str]:
        """Indexed anagrams of `word` other than `word` itself, sorted."""
        return sorted(member for member in self.bucket_for(word) if member != word)

    def __len__(self) -> int:
        return len(self._buckets)
