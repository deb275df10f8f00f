"""Class-attribute extraction from source text.

Runs every strategy registered for a file's extension over the whole text
and collects the raw class strings it captures. A normal match contributes
one raw string (possibly holding several space-separated classes). A
list-directive array literal contributes one entry per quoted item, since
each item is a single class rather than a class list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..logging_config import get_logger
from ..models import FileParseResult
from .dialects import split_array_literal

if TYPE_CHECKING:
    from ..config import AnalyzerConfig

logger = get_logger(__name__)


def find_classes_in_source(source: str, file_path: str, config: AnalyzerConfig) -> FileParseResult:
    """Extract raw class strings from ``source``.

    Args:
        source: File contents
        file_path: Path used for extension dispatch and the result record
        config: Analyzer configuration carrying the dialect table

    Returns:
        FileParseResult with patterns in match order and the names of the
        strategies that matched at least once. Files whose extension has no
        strategies yield an empty result.
    """
    patterns: List[str] = []
    strategies_used: List[str] = []

    for strategy in config.parsing.strategies_for(file_path):
        matched = False
        # finditer starts a fresh scan on every call
        for match in strategy.pattern.finditer(source):
            raw, is_array = strategy.select(match)
            if not raw:
                continue
            if is_array:
                patterns.extend(split_array_literal(raw))
            else:
                patterns.append(raw)
            matched = True
        if matched:
            strategies_used.append(strategy.name)

    if patterns:
        logger.debug(
            f"{file_path}: {len(patterns)} class lists via {', '.join(strategies_used)}"
        )
    return FileParseResult(file=file_path, patterns=patterns, strategies_used=strategies_used)
