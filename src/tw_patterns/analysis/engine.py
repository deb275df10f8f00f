"""Analysis pipeline: extract → aggregate → cluster → score → rank → report."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from ..config import AnalyzerConfig
from ..logging_config import get_logger
from ..models import FileParseResult, Report
from ..scanning.extractor import find_classes_in_source
from .aggregator import PatternAggregator
from .clustering import build_clusters
from .scoring import finalize_cluster, rank_clusters

logger = get_logger(__name__)


class PatternAnalyzer:
    """Single forward pass over already-read sources.

    Sources must be fed in a fixed order (the API uses sorted file paths):
    the aggregator's tie-break and the greedy clustering both depend on it.

    Example:
        >>> analyzer = PatternAnalyzer(config)
        >>> analyzer.add_source("Card.tsx", source)
        >>> report = analyzer.build_report(total_files=1)
    """

    def __init__(self, config: AnalyzerConfig):
        self.config = config
        self.aggregator = PatternAggregator()
        self.file_results: List[FileParseResult] = []

    def add_source(self, file_path: str, source: str) -> FileParseResult:
        """Extract class strings from one file and fold them in."""
        result = find_classes_in_source(source, file_path, self.config)
        if result.patterns:
            self.file_results.append(result)
            self.aggregator.add_result(result)
        return result

    def add_sources(self, sources: Iterable[Tuple[str, str]]) -> None:
        for file_path, source in sources:
            self.add_source(file_path, source)

    def build_report(
        self,
        total_files: Optional[int] = None,
        failed_files: Optional[List[str]] = None,
    ) -> Report:
        """Cluster, score and rank the aggregated patterns.

        Args:
            total_files: Files considered in the run (default: files added)
            failed_files: Paths skipped because they could not be read
        """
        config = self.config
        stats = self.aggregator.stats(config.min_occurrences)
        # Frequency share and totals count retained patterns only
        total = sum(s.occurrences for s in stats)

        clusters = build_clusters(stats, config.similarity_threshold)
        for cluster in clusters:
            finalize_cluster(cluster, total, config.scoring)
        ranked = rank_clusters(clusters, config.min_variants)

        logger.info(
            f"{self.aggregator.unique_patterns} unique patterns, {len(stats)} retained, "
            f"{len(clusters)} clusters, {len(ranked)} reported"
        )

        return Report(
            total_class_lists=total,
            unique_patterns=self.aggregator.unique_patterns,
            total_files=total_files if total_files is not None else len(self.file_results),
            clusters=ranked,
            generated_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            failed_files=list(failed_files or []),
            settings=config.summary(),
        )
