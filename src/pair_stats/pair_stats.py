"""Run the co-occurrence pipeline over an in-memory pair sequence."""

from __future__ import annotations

import logging
from typing import Sequence

from aggregate_pairs.aggregate_pairs import aggregate_pairs
from build_graph.build_graph import build_graph, edge_count
from filter_pairs.filter_pairs import filter_popular_pairs, validate_threshold
from find_components.find_components import find_components
from pair_stats.models import PairStatsResult

logger = logging.getLogger(__name__)


def run_pair_stats(
    pairs: Sequence[tuple[str, str]],
    threshold: int,
    workers: int = 1,
) -> PairStatsResult:
    """
    Build the relationship graph and compute components and popular pairs.

    The threshold is checked before the graph is built, so a bad value
    fails without doing any work.

    Args:
        pairs: Sequence of (entity_a, entity_b) tuples.
        threshold: Minimum co-occurrence count to report.
        workers: Partitions used for pair aggregation.

    Returns:
        PairStatsResult for the run.
    """
    validate_threshold(threshold)

    if not pairs:
        logger.warning("No entity pairs to process")

    graph = build_graph(pairs)
    components = find_components(graph)
    aggregated = aggregate_pairs(graph, workers=workers)
    popular_pairs = filter_popular_pairs(aggregated, threshold)

    return PairStatsResult(
        threshold=threshold,
        node_count=graph.number_of_nodes(),
        edge_count=edge_count(graph),
        components=components,
        aggregated=aggregated,
        popular_pairs=popular_pairs,
    )
