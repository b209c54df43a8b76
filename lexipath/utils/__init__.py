"""Utility functions for LexiPath."""

from lexipath.utils.constants import Constants
from lexipath.utils.helpers import expand_file_path, read_text_safely
from lexipath.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "read_text_safely",
    "setup_logger",
]
