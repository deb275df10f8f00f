"""Likelihood scoring and ranking of clusters.

The likelihood that a cluster is worth extracting is a 0-100 score with two
capped components:

    variant_score = min(Wv, (variants - 1) * Wv / 4)
    freq_score    = min(Wf, round(share * 400))
    likelihood    = clamp(variant_score + freq_score, 0, 100)

where ``share`` is the cluster's fraction of all retained occurrences. With
the default weights (60/40) five members max out the variant component and
a 10% share maxes out the frequency component.
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from ..config import ScoringWeights
from ..models import Cluster
from ..tokens import jaccard

FREQUENCY_MULTIPLIER = 400
VARIANT_DIVISOR = 4


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_likelihood(
    variant_count: int,
    occurrences: int,
    total_occurrences: int,
    weights: ScoringWeights,
) -> int:
    """Score a cluster from its size and frequency share.

    Args:
        variant_count: Number of member patterns (>= 1)
        occurrences: Summed occurrences of the members
        total_occurrences: Occurrences across all retained patterns
        weights: Maximum points per component

    Returns:
        Integer likelihood in [0, 100]
    """
    variant_score = min(
        weights.variants, max(0, variant_count - 1) * (weights.variants / VARIANT_DIVISOR)
    )
    share = occurrences / total_occurrences if total_occurrences else 0.0
    freq_score = min(weights.frequency, _round_half_up(share * FREQUENCY_MULTIPLIER))
    return _round_half_up(max(0.0, min(100.0, variant_score + freq_score)))


def finalize_cluster(cluster: Cluster, total_occurrences: int, weights: ScoringWeights) -> Cluster:
    """Compute the derived metrics of a cluster and freeze it."""
    cluster.variant_count = len(cluster.members)
    similarities = [jaccard(member, cluster.representative) for member in cluster.members]
    cluster.average_similarity = float(np.mean(similarities)) if similarities else 1.0
    cluster.likelihood = compute_likelihood(
        cluster.variant_count, cluster.occurrences, total_occurrences, weights
    )
    cluster.finalized = True
    return cluster


def rank_clusters(clusters: Sequence[Cluster], min_variants: int = 1) -> List[Cluster]:
    """Drop clusters below ``min_variants`` and order by likelihood.

    The sort is stable: equal likelihoods keep clustering order.
    """
    kept = [c for c in clusters if c.variant_count >= min_variants]
    return sorted(kept, key=lambda c: c.likelihood, reverse=True)
