"""Shared CLI helpers."""

from typing import Optional

from rich.console import Console

from ..config import (
    DEFAULT_CONSOLE_TOP,
    DEFAULT_MIN_OCCURRENCES,
    DEFAULT_MIN_VARIANTS,
    DEFAULT_SIMILARITY_THRESHOLD,
)
from ..logging_config import get_logger

console = Console()
logger = get_logger(__name__)

# Starter config written by init skips one-off class lists
INIT_MIN_OCCURRENCES = 2


class ExitCode:
    SUCCESS = 0
    CONFIG_ERROR = 81
    PATH_NOT_FOUND = 82


def threshold_option(value: Optional[float]) -> Optional[float]:
    """Keep a threshold in [0, 1]; anything else falls back to the default."""
    if value is None:
        return None
    if 0.0 <= value <= 1.0:
        return value
    logger.warning(
        f"Invalid --threshold {value} (expected 0-1); using {DEFAULT_SIMILARITY_THRESHOLD}"
    )
    return DEFAULT_SIMILARITY_THRESHOLD


def count_option(name: str, value: Optional[int], fallback: int) -> Optional[int]:
    """Keep a positive count; zero or negative values fall back."""
    if value is None:
        return None
    if value > 0:
        return value
    logger.warning(f"Invalid {name} {value} (expected a positive integer); using {fallback}")
    return fallback


def min_occurrences_option(
    value: Optional[int], fallback: int = DEFAULT_MIN_OCCURRENCES
) -> Optional[int]:
    return count_option("--min-occurrences", value, fallback)


def min_variants_option(value: Optional[int]) -> Optional[int]:
    return count_option("--min-variants", value, DEFAULT_MIN_VARIANTS)


def top_option(value: Optional[int]) -> Optional[int]:
    return count_option("--top", value, DEFAULT_CONSOLE_TOP)
