"""Log sinks for the lexipath command and library."""

from pathlib import Path
import sys

from loguru import logger


def _level_for(verbose: bool, debug: bool) -> str:
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    return "WARNING"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Warnings (expansion cap hits, unreadable files) always reach stderr.
    `verbose` adds dictionary load counts and per-query expansion totals;
    `debug` adds per-query search statistics with timestamps and call sites.
    Result lines go to stdout and are never routed through the logger.

    Args:
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    logger.remove()

    if debug:
        format_str = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )
    else:
        format_str = "<level>{message}</level>"

    logger.add(sys.stderr, format=format_str, level=_level_for(verbose, debug), colorize=True)


def add_log_file_handler(log_file: str | Path, verbose: bool = False, debug: bool = False) -> None:
    """Mirror search logs into `log_file` (the `--log-file` option).

    The stderr sink from `setup_logger` is kept. The file gets the same level
    without color codes, and missing parent directories are created.

    Args:
        log_file: Path to log file
        verbose: Enable INFO level messages
        debug: Enable DEBUG level messages (overrides verbose)
    """
    if debug:
        file_format_str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {function}:{line} - {message}"
    else:
        file_format_str = "{message}"

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path,
        format=file_format_str,
        level=_level_for(verbose, debug),
        colorize=False,
        encoding="utf-8",
    )
