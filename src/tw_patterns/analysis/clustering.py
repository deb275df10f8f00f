"""Greedy single-pass clustering of canonical patterns.

Each pattern, in the order given, joins the first existing cluster (in
creation order) whose representative is at least ``threshold`` similar;
otherwise it seeds a new cluster. The first qualifying cluster wins even if
a later one would be more similar, so the output depends on input order.
The aggregator's occurrence-descending, first-seen tie-broken order keeps
it reproducible.
"""

from __future__ import annotations

from typing import List, Sequence

from ..models import Cluster, PatternStats
from ..tokens import jaccard


def build_clusters(stats: Sequence[PatternStats], threshold: float) -> List[Cluster]:
    """Assign every pattern to a cluster.

    Args:
        stats: Pattern statistics in processing order
        threshold: Minimum Jaccard similarity to the representative

    Returns:
        Clusters in creation order (not yet scored)
    """
    clusters: List[Cluster] = []
    for stat in stats:
        for cluster in clusters:
            if jaccard(stat.pattern, cluster.representative) >= threshold:
                cluster.add_member(stat)
                break
        else:
            clusters.append(Cluster.seed(stat))
    return clusters
