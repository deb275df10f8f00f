"""Data models for tw-pattern-analyzer"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class FileParseResult:
    """Raw class strings extracted from a single file"""

    file: str
    patterns: List[str] = field(default_factory=list)
    strategies_used: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.file,
            "patterns": list(self.patterns),
            "parseStrategies": list(self.strategies_used),
        }


@dataclass
class PatternStats:
    """Occurrence statistics for one canonical pattern"""

    pattern: str
    occurrences: int
    percent: float = 0.0
    variants: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern,
            "occurrences": self.occurrences,
            "percent": self.percent,
            "variants": list(self.variants),
        }


@dataclass
class Cluster:
    """A group of similar canonical patterns around a representative.

    Clusters are mutable while the greedy builder runs. Once scored they are
    marked finalized and ``add_member`` refuses further changes.
    """

    representative: str
    members: List[str] = field(default_factory=list)
    occurrences: int = 0
    variant_count: int = 1
    average_similarity: float = 1.0
    likelihood: int = 0
    finalized: bool = False

    @classmethod
    def seed(cls, stats: PatternStats) -> "Cluster":
        return cls(
            representative=stats.pattern,
            members=[stats.pattern],
            occurrences=stats.occurrences,
        )

    def add_member(self, stats: PatternStats) -> None:
        if self.finalized:
            raise RuntimeError(f"Cluster {self.representative!r} is already finalized")
        self.members.append(stats.pattern)
        self.occurrences += stats.occurrences

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rep": self.representative,
            "members": list(self.members),
            "occurrences": self.occurrences,
            "variants": self.variant_count,
            "similarity": self.average_similarity,
            "likelihood": self.likelihood,
        }


@dataclass
class Report:
    """Final analysis output handed to the console and JSON writers"""

    total_class_lists: int
    unique_patterns: int
    total_files: int
    clusters: List[Cluster]
    generated_at: str
    failed_files: List[str] = field(default_factory=list)
    settings: Optional[Dict[str, Any]] = None
    # Where the JSON report was written, if it was; not serialized
    output_path: Optional[str] = None

    @property
    def total_patterns(self) -> int:
        """Alias of ``total_class_lists`` kept for report consumers."""
        return self.total_class_lists

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "totalClassLists": self.total_class_lists,
            "uniquePatterns": self.unique_patterns,
            "totalFiles": self.total_files,
            "totalPatterns": self.total_patterns,
            "clusters": [c.to_dict() for c in self.clusters],
            "generatedAt": self.generated_at,
            "failedFiles": list(self.failed_files),
        }
        if self.settings is not None:
            data["config"] = dict(self.settings)
        return data
