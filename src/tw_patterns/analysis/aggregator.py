"""Occurrence counting per canonical pattern."""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..models import FileParseResult, PatternStats
from ..tokens import canonicalize


class PatternAggregator:
    """Fold raw class strings into per-pattern counts.

    Raw strings that canonicalize to the same pattern share one counter; the
    distinct raw spellings are kept as variants in first-seen order. Dict
    insertion order records first-seen order of the canonical patterns,
    which breaks occurrence ties in ``stats``.
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}
        self._variants: Dict[str, List[str]] = {}

    def add(self, raw: str) -> str:
        """Count one raw class string and return its canonical pattern."""
        key = canonicalize(raw)
        self._counts[key] = self._counts.get(key, 0) + 1
        variants = self._variants.setdefault(key, [])
        if raw not in variants:
            variants.append(raw)
        return key

    def add_result(self, result: FileParseResult) -> None:
        for raw in result.patterns:
            self.add(raw)

    def add_all(self, results: Iterable[FileParseResult]) -> None:
        for result in results:
            self.add_result(result)

    @property
    def total_occurrences(self) -> int:
        return sum(self._counts.values())

    @property
    def unique_patterns(self) -> int:
        return len(self._counts)

    def stats(self, min_occurrences: int = 1) -> List[PatternStats]:
        """Per-pattern statistics, most frequent first.

        ``percent`` is relative to every counted occurrence, including
        patterns later dropped by ``min_occurrences``. ``sorted`` is stable,
        so equal counts keep first-seen order.
        """
        total = self.total_occurrences
        stats = [
            PatternStats(
                pattern=pattern,
                occurrences=count,
                percent=round(count / total * 100, 2) if total else 0.0,
                variants=list(self._variants[pattern]),
            )
            for pattern, count in self._counts.items()
            if count >= min_occurrences
        ]
        return sorted(stats, key=lambda s: s.occurrences, reverse=True)
