"""Drivers that load a dictionary and answer instruction files."""

from collections.abc import Callable, Iterable, Sequence
import sys
from typing import TextIO

from loguru import logger
from tqdm import tqdm

from lexipath.core import Config, ConfigurationError, SearchQuery, load_instruction
from lexipath.data import DictionaryIndex
from lexipath.search import SearchEngine
from lexipath.utils import Constants


def load_dictionary(config: Config) -> DictionaryIndex:
    """Build the dictionary index selected by the configuration."""
    if config.builtin_dictionary:
        return DictionaryIndex.from_english_words(verbose=config.verbose)
    if not config.words:
        raise ConfigurationError("No word list configured")
    return DictionaryIndex.load_from(config.words, verbose=config.verbose)


def format_result(query: SearchQuery, cost: int) -> str:
    return f"cost from {query.origin} to {query.target} is {cost}"


def answer_query(query: SearchQuery, dictionary: DictionaryIndex, config: Config) -> int:
    """Run one search and log its statistics."""
    engine = SearchEngine(query.costs, dictionary, max_expansions=config.max_expansions)
    cost = engine.find_minimum_cost(query.origin, query.target)
    stats = engine.last_stats
    if config.verbose and stats is not None:
        logger.info(
            f"  {query.origin} -> {query.target}: expanded {stats.expanded:,} words "
            f"in {stats.elapsed_time:.2f}s"
        )
    return cost


def run_instruction_files(
    paths: Sequence[str],
    dictionary: DictionaryIndex,
    config: Config,
    output: TextIO | None = None,
) -> list[int]:
    """Answer each instruction file in order, writing one result line per file.

    Raises:
        ConfigurationError: If an instruction file is malformed.
        OSError: If an instruction file cannot be read.
    """
    output = output or sys.stdout
    paths_iter: Iterable[str] = paths
    if config.verbose and len(paths) > 1:
        paths_iter = tqdm(paths, desc="Answering queries", unit="query")

    results = []
    for path in paths_iter:
        query = load_instruction(path)
        cost = answer_query(query, dictionary, config)
        output.write(format_result(query, cost) + "\n")
        results.append(cost)
    return results


def run_interactive(
    dictionary: DictionaryIndex,
    config: Config,
    read_line: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> list[int]:
    """Prompt for instruction files until the exit command is entered.

    Unreadable or malformed files are reported and the loop continues.
    End of input ends the loop like the exit command.
    """
    output = output or sys.stdout
    results = []
    while True:
        try:
            entry = read_line(Constants.INTERACTIVE_PROMPT).strip()
        except EOFError:
            break
        if entry.lower() == Constants.EXIT_COMMAND:
            break
        try:
            query = load_instruction(entry)
        except (ConfigurationError, OSError) as e:
            output.write(f"{e}\n")
            continue
        cost = answer_query(query, dictionary, config)
        output.write(format_result(query, cost) + "\n")
        results.append(cost)
    return results
