"""Pattern aggregation, clustering and scoring."""

from .aggregator import PatternAggregator
from .clustering import build_clusters
from .engine import PatternAnalyzer
from .scoring import compute_likelihood, finalize_cluster, rank_clusters

__all__ = [
    "PatternAggregator",
    "PatternAnalyzer",
    "build_clusters",
    "compute_likelihood",
    "finalize_cluster",
    "rank_clusters",
]
