"""Shared utility functions for LexiPath."""

import os
from typing import Callable, TypeVar

from loguru import logger

T = TypeVar("T")


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_text_safely(filepath: str, description: str, reader: Callable[[str], T]) -> T:
    """Run `reader` on a file path with consistent error logging.

    Every failure is logged with a hint and re-raised unchanged.

    Args:
        filepath: Path of the file to read
        description: Human-readable name used in error messages
        reader: Callable that opens and parses the file

    Raises:
        FileNotFoundError: If the file does not exist
        PermissionError: If reading is denied
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    try:
        return reader(filepath)
    except FileNotFoundError:
        logger.error(f"✗ {description} not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading {description.lower()}: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise
    except Exception as e:
        logger.error(f"✗ Unexpected error reading {description.lower()} {filepath}: {e}")
        raise
