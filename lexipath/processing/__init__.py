"""Query processing drivers for LexiPath."""

from lexipath.processing.runner import (
    answer_query,
    format_result,
    load_dictionary,
    run_instruction_files,
    run_interactive,
)

__all__ = [
    "answer_query",
    "format_result",
    "load_dictionary",
    "run_instruction_files",
    "run_interactive",
]
