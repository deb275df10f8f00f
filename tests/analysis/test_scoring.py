"""Tests for likelihood scoring and ranking."""

import pytest

from tw_patterns.analysis import compute_likelihood, finalize_cluster, rank_clusters
from tw_patterns.config import ScoringWeights
from tw_patterns.models import Cluster

WEIGHTS = ScoringWeights()


def _cluster(members, occurrences, likelihood=0):
    cluster = Cluster(representative=members[0], members=list(members), occurrences=occurrences)
    cluster.variant_count = len(members)
    cluster.likelihood = likelihood
    return cluster


class TestComputeLikelihood:
    def test_two_variants_twenty_percent_share(self):
        # variant 15 + frequency min(40, 80)
        assert compute_likelihood(2, 25, 125, WEIGHTS) == 55

    def test_single_variant_small_share(self):
        # 1% share -> round(4.0)
        assert compute_likelihood(1, 1, 100, WEIGHTS) == 4

    def test_variant_component_caps(self):
        assert compute_likelihood(5, 0, 100, WEIGHTS) == 60
        assert compute_likelihood(12, 0, 100, WEIGHTS) == 60

    def test_frequency_rounds_half_up(self):
        # 1/32 share -> 12.5 points -> 13
        assert compute_likelihood(1, 1, 32, WEIGHTS) == 13

    def test_zero_total(self):
        assert compute_likelihood(3, 0, 0, WEIGHTS) == 30

    def test_maximum_is_one_hundred(self):
        assert compute_likelihood(10, 100, 100, WEIGHTS) == 100

    def test_custom_weights_clamped(self):
        weights = ScoringWeights(variants=90, frequency=90)
        assert compute_likelihood(10, 100, 100, weights) == 100

    @pytest.mark.parametrize("total", [1, 10, 57, 400])
    def test_bounds_and_monotonic(self, total):
        previous_by_variants = None
        for variants in range(1, 9):
            previous_by_occurrences = None
            for occurrences in range(0, total + 1, max(1, total // 10)):
                score = compute_likelihood(variants, occurrences, total, WEIGHTS)
                assert 0 <= score <= 100
                if previous_by_occurrences is not None:
                    assert score >= previous_by_occurrences
                previous_by_occurrences = score
            score = compute_likelihood(variants, total, total, WEIGHTS)
            if previous_by_variants is not None:
                assert score >= previous_by_variants
            previous_by_variants = score


class TestFinalizeCluster:
    def test_derived_metrics(self):
        cluster = Cluster(
            representative="flex gap-4 items-center",
            members=["flex gap-4 items-center", "flex gap-4 justify-center"],
            occurrences=4,
        )
        finalize_cluster(cluster, total_occurrences=8, weights=WEIGHTS)
        assert cluster.variant_count == 2
        assert cluster.average_similarity == pytest.approx(0.75)
        assert cluster.likelihood == 55
        assert cluster.finalized

    def test_singleton_similarity_is_one(self):
        cluster = Cluster(representative="flex", members=["flex"], occurrences=1)
        finalize_cluster(cluster, total_occurrences=100, weights=WEIGHTS)
        assert cluster.average_similarity == 1.0
        assert cluster.likelihood == 4


class TestRankClusters:
    def test_sorted_by_likelihood_descending(self):
        clusters = [_cluster(["a"], 1, 10), _cluster(["b"], 1, 70), _cluster(["c"], 1, 40)]
        assert [c.representative for c in rank_clusters(clusters)] == ["b", "c", "a"]

    def test_ties_keep_clustering_order(self):
        clusters = [_cluster(["a"], 1, 40), _cluster(["b"], 1, 50), _cluster(["c"], 1, 40)]
        assert [c.representative for c in rank_clusters(clusters)] == ["b", "a", "c"]

    def test_min_variants_filter(self):
        clusters = [_cluster(["a"], 5, 90), _cluster(["b", "b c"], 2, 20)]
        ranked = rank_clusters(clusters, min_variants=2)
        assert [c.representative for c in ranked] == ["b"]
        assert all(c.variant_count >= 2 for c in ranked)
