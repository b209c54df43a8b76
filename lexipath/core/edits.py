"""Single-letter edit generators for expanding a search state."""

from collections.abc import Iterator

from lexipath.utils import Constants


def generate_insertions(word: str) -> Iterator[str]:
    """Yield every word formed by inserting one letter at any position."""
    for i in range(len(word) + 1):
        for letter in Constants.ALPHABET:
            yield word[:i] + letter + word[i:]


def generate_deletions(word: str) -> Iterator[str]:
    """Yield every word formed by removing one character."""
    for i in range(len(word)):
        yield word[:i] + word[i + 1 :]


def generate_substitutions(word: str) -> Iterator[str]:
    """Yield every word formed by replacing one character with any letter.

    Replacing a letter with itself yields the original word; callers rely on
    the explored map to drop it.
    """
    for i in range(len(word)):
        for letter in Constants.ALPHABET:
            yield word[:i] + letter + word[i + 1 :]
