"""Tests for greedy first-match clustering."""

import pytest

from tw_patterns.analysis import build_clusters
from tw_patterns.models import Cluster, PatternStats


def _stats(*pairs):
    return [PatternStats(pattern=p, occurrences=n) for p, n in pairs]


class TestBuildClusters:
    def test_similar_patterns_merge(self):
        stats = _stats(("flex gap-4 items-center", 3), ("flex gap-4 justify-center", 1))
        clusters = build_clusters(stats, threshold=0.5)
        assert len(clusters) == 1
        assert clusters[0].representative == "flex gap-4 items-center"
        assert clusters[0].members == ["flex gap-4 items-center", "flex gap-4 justify-center"]
        assert clusters[0].occurrences == 4

    def test_below_threshold_seeds_new_cluster(self):
        stats = _stats(("flex gap-4 items-center", 3), ("flex gap-4 justify-center", 1))
        clusters = build_clusters(stats, threshold=0.75)
        assert [c.representative for c in clusters] == [
            "flex gap-4 items-center",
            "flex gap-4 justify-center",
        ]

    def test_first_qualifying_cluster_wins(self):
        # "a b c d" is 0.5 similar to both representatives; it joins the older one
        stats = _stats(("a b", 5), ("c d", 4), ("a b c d", 1))
        clusters = build_clusters(stats, threshold=0.5)
        assert clusters[0].members == ["a b", "a b c d"]
        assert clusters[1].members == ["c d"]

    def test_compares_against_representative_only(self):
        # "b c d" is 0.75 similar to member "a b c d" but only 0.5 to the representative
        stats = _stats(("a b c", 3), ("a b c d", 2), ("b c d", 1))
        clusters = build_clusters(stats, threshold=0.6)
        assert clusters[0].members == ["a b c", "a b c d"]
        assert clusters[1].members == ["b c d"]

    def test_threshold_is_inclusive(self):
        stats = _stats(("a b", 2), ("a c", 1))
        assert len(build_clusters(stats, threshold=1 / 3)) == 1

    def test_empty_input(self):
        assert build_clusters([], threshold=0.5) == []

    @pytest.mark.parametrize("low,high", [(0.25, 0.5), (0.5, 0.75), (0.75, 1.0)])
    def test_higher_threshold_never_reduces_cluster_count(self, low, high):
        stats = _stats(
            ("flex gap-4 items-center", 6),
            ("flex gap-4 justify-center", 4),
            ("flex gap-2 items-center", 3),
            ("p-4 rounded shadow", 2),
            ("p-4 rounded", 2),
            ("flex", 1),
        )
        assert len(build_clusters(stats, low)) <= len(build_clusters(stats, high))


class TestCluster:
    def test_finalized_cluster_rejects_members(self):
        cluster = Cluster.seed(PatternStats(pattern="flex", occurrences=1))
        cluster.finalized = True
        with pytest.raises(RuntimeError):
            cluster.add_member(PatternStats(pattern="flex p-4", occurrences=1))

    def test_to_dict_keys(self):
        cluster = Cluster.seed(PatternStats(pattern="flex", occurrences=2))
        assert cluster.to_dict() == {
            "rep": "flex",
            "members": ["flex"],
            "occurrences": 2,
            "variants": 1,
            "similarity": 1.0,
            "likelihood": 0,
        }
