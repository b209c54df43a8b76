"""Data loading and management for LexiPath."""

from lexipath.data.anagrams import AnagramIndex, is_anagram_of, signature
from lexipath.data.dictionary import DictionaryIndex, load_word_list, normalize_word

__all__ = [
    "AnagramIndex",
    "DictionaryIndex",
    "is_anagram_of",
    "load_word_list",
    "normalize_word",
    "signature",
]
