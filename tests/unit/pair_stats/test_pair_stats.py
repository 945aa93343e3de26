"""Tests for pair_stats.pair_stats module."""

from unittest.mock import patch

import pytest

from aggregate_pairs.models import AggregatedPair, EntityPair
from filter_pairs.filter_pairs import InvalidThresholdError
from pair_stats.pair_stats import run_pair_stats


class TestRunPairStats:
    def test_concrete_scenario(self) -> None:
        result = run_pair_stats([("A", "B"), ("B", "A"), ("A", "C"), ("D", "E")], threshold=2)

        assert result.aggregated == {
            EntityPair("A", "B"): 2,
            EntityPair("A", "C"): 1,
            EntityPair("D", "E"): 1,
        }
        assert result.popular_pairs == [AggregatedPair(EntityPair("A", "B"), 2)]
        assert set(result.components) == {frozenset({"A", "B", "C"}), frozenset({"D", "E"})}
        assert result.node_count == 5
        assert result.edge_count == 4

    @pytest.mark.parametrize("threshold", [0, 1, 100])
    def test_empty_input(self, threshold) -> None:
        result = run_pair_stats([], threshold=threshold)
        assert result.node_count == 0
        assert result.edge_count == 0
        assert result.components == []
        assert result.aggregated == {}
        assert result.popular_pairs == []

    def test_self_pairs(self) -> None:
        result = run_pair_stats([("A", "A"), ("A", "A")], threshold=0)
        assert result.aggregated == {EntityPair("A", "A"): 2}
        assert result.components == [frozenset({"A"})]

    def test_workers_match_sequential(self) -> None:
        pairs = [("A", "B"), ("C", "B"), ("B", "A"), ("D", "D")] * 5
        sequential = run_pair_stats(pairs, threshold=1)
        parallel = run_pair_stats(pairs, threshold=1, workers=3)
        assert parallel.aggregated == sequential.aggregated
        assert parallel.popular_pairs == sequential.popular_pairs

    @patch("pair_stats.pair_stats.build_graph")
    def test_invalid_threshold_fails_before_build(self, mock_build) -> None:
        with pytest.raises(InvalidThresholdError):
            run_pair_stats([("A", "B")], threshold=-1)
        mock_build.assert_not_called()
