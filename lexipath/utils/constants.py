"""Shared constants for LexiPath."""

import string


class Constants:
    """Namespace for values shared across modules."""

    # Result returned when the target cannot be reached
    UNREACHABLE = -1

    # Words must be strictly longer than this to be visited
    MIN_WORD_LENGTH_EXCLUSIVE = 3

    ALPHABET = string.ascii_lowercase

    # insert, delete, substitute, anagram
    COST_COUNT = 4
    INSTRUCTION_LINE_COUNT = 3

    DEFAULT_WORD_FILE = "words.txt"
    ENGLISH_WORDS_SOURCES = ("web2", "gcide")

    EXIT_COMMAND = "exit"
    INTERACTIVE_PROMPT = "Enter fileName or type exit for stop: "
