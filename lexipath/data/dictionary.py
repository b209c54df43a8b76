"""Dictionary loading and the read-only word index."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from lexipath.data.anagrams import AnagramIndex
from lexipath.utils import Constants, expand_file_path, read_text_safely


def normalize_word(token: str) -> str:
    return token.strip().lower()


class DictionaryIndex:
    """Immutable set of valid words with its longest length and anagram index.

    Built once and shared by every query; nothing mutates it after
    construction.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: frozenset[str] = frozenset(normalize_word(word) for word in words)
        self._max_length = max((len(word) for word in self._words), default=0)
        self._anagrams = AnagramIndex(self._words)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> DictionaryIndex:
        """Build an index from an iterable of words."""
        return cls(words)

    @classmethod
    def load_from(cls, source: str | Path, verbose: bool = False) -> DictionaryIndex:
        """Load a newline-delimited word file.

        Every line is trimmed and lower-cased. Blank lines become the empty
        string, which the search rejects through its length floor.

        Raises:
            OSError: If the file cannot be read.
        """
        filepath = expand_file_path(str(source)) or str(source)
        if verbose:
            logger.info(f"  Loading dictionary from {filepath}...")

        words = read_text_safely(filepath, "Word list file", load_word_list)
        index = cls(words)

        if verbose:
            logger.info(
                f"  Loaded {len(index)} words "
                f"({len(index.anagrams)} anagram signatures, longest {index.max_length})"
            )
        return index

    @classmethod
    def from_english_words(cls, verbose: bool = False) -> DictionaryIndex:
        """Build an index from the english-words package."""
        if verbose:
            logger.info("  Loading English words dictionary...")
        try:
            words: set[str] = get_english_words_set(
                list(Constants.ENGLISH_WORDS_SOURCES), lower=True
            )
        except Exception as e:
            logger.error(f"✗ Failed to load English words dictionary: {e}")
            logger.error("  This may indicate a problem with the 'english-words' package")
            logger.error("  Try reinstalling: pip install english-words")
            raise RuntimeError("Failed to load built-in dictionary") from e

        index = cls(words)
        if verbose:
            logger.info(f"  Loaded {len(index)} words from english-words")
        return index

    @property
    def max_length(self) -> int:
        return self._max_length

    @property
    def anagrams(self) -> AnagramIndex:
        return self._anagrams

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def is_valid_state(self, word: str) -> bool:
        """True if `word` may be visited: a dictionary word of admissible length."""
        return (
            word in self._words
            and Constants.MIN_WORD_LENGTH_EXCLUSIVE < len(word) <= self._max_length
        )


def load_word_list(filepath: str) -> list[str]:
    """Read a word file and return one normalized entry per line."""
    with open(filepath, "r", encoding="utf-8") as f:
        content = f.read()
    return [normalize_word(line) for line in content.split("\n")]
