"""Command-line interface for the LexiPath project."""

import argparse

from lexipath.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Find the cheapest chain of word edits between two dictionary words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Answer one or more instruction files against words.txt
  %(prog)s input1.txt input2.txt

  # One-off query with explicit costs (insert delete substitute anagram)
  %(prog)s --costs 1 3 1 5 --origin team --target mate -w words.txt

  # Prompt for instruction files until 'exit'
  %(prog)s --interactive --builtin-dictionary

Instruction file format (three lines):
  1 3 1 5
  team
  mate

Example config.json:
{
  "words": "~/dictionaries/words.txt",
  "max_expansions": 100000,
  "log_file": "lexipath.log",
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "instructions",
        nargs="*",
        help="Instruction files (costs line, origin line, target line)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Dictionary
    parser.add_argument(
        "-w",
        "--words",
        type=str,
        default=Constants.DEFAULT_WORD_FILE,
        help=f"Word list file, one word per line (default: {Constants.DEFAULT_WORD_FILE})",
    )
    parser.add_argument(
        "--builtin-dictionary",
        action="store_true",
        help="Use the english-words package instead of a word list file",
    )

    # Manual query
    parser.add_argument(
        "--costs",
        type=str,
        nargs=4,
        metavar=("INSERT", "DELETE", "SUBSTITUTE", "ANAGRAM"),
        help="Insert, delete, substitute and anagram costs for a one-off query",
    )
    parser.add_argument("--origin", type=str, help="Origin word for a one-off query")
    parser.add_argument("--target", type=str, help="Target word for a one-off query")

    # Search limits
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Stop each search after expanding this many words (default: unbounded)",
    )

    # Modes and flags
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Prompt for instruction files until 'exit' is entered",
    )
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
