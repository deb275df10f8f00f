"""
Logging configuration for tw-pattern-analyzer.

Routes warnings about skipped files and fallback configuration through a
rich handler on stderr so they never mix with the report table on stdout.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "tw_patterns"

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _rich_handler(verbose: bool) -> RichHandler:
    # markup off: class lists such as "w-[200px]" would be read as rich tags
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Attach stderr (and optionally file) handlers to the tw_patterns logger.

    Handlers from an earlier call are replaced, so the CLI can be invoked
    repeatedly in one process without duplicating output.

    Args:
        verbose: Log DEBUG messages, with timestamps and source paths
        quiet: Only log errors
        log_file: Also append log records to this file

    Returns:
        The configured tw_patterns logger
    """
    handlers: List[logging.Handler] = [_rich_handler(verbose)]
    if log_file:
        handlers.append(_file_handler(log_file))

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(_level_for(verbose, quiet))

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the tw_patterns namespace.

    Args:
        name: Module name (e.g., 'tw_patterns.api'); other names are
              prefixed with 'tw_patterns.'. None returns the package logger.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
