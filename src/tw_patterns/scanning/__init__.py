"""Source scanning: dialect table, class extraction and file discovery."""

from .dialects import (
    DEFAULT_FILE_TYPES,
    DEFAULT_PATTERNS,
    DEFAULT_STRATEGIES,
    DialectStrategy,
    build_strategies,
    split_array_literal,
)
from .discovery import discover_files, expand_braces
from .extractor import find_classes_in_source

__all__ = [
    "DEFAULT_FILE_TYPES",
    "DEFAULT_PATTERNS",
    "DEFAULT_STRATEGIES",
    "DialectStrategy",
    "build_strategies",
    "split_array_literal",
    "discover_files",
    "expand_braces",
    "find_classes_in_source",
]
