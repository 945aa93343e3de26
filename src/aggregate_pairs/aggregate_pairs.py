"""Collapse parallel edges into per-pair co-occurrence counts."""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Sequence

import networkx as nx

from aggregate_pairs.models import EntityPair

logger = logging.getLogger(__name__)


def count_edges(edges: Iterable[tuple[str, str]]) -> dict[EntityPair, int]:
    """
    Count edges per canonical entity pair.

    Edges (a, b) and (b, a) land on the same EntityPair, so endpoint order
    never splits a count.
    """
    counts: dict[EntityPair, int] = {}
    for entity_a, entity_b in edges:
        pair = EntityPair.of(entity_a, entity_b)
        counts[pair] = counts.get(pair, 0) + 1
    return counts


def merge_counts(partials: Iterable[dict[EntityPair, int]]) -> dict[EntityPair, int]:
    """Merge partial count maps by summing counts per pair."""
    merged: Counter[EntityPair] = Counter()
    for partial in partials:
        merged.update(partial)
    return dict(merged)


def _partition(edges: Sequence[tuple[str, str]], parts: int) -> list[Sequence[tuple[str, str]]]:
    size, remainder = divmod(len(edges), parts)
    chunks = []
    start = 0
    for index in range(parts):
        end = start + size + (1 if index < remainder else 0)
        if end > start:
            chunks.append(edges[start:end])
        start = end
    return chunks


def aggregate_pairs(graph: nx.MultiGraph, workers: int = 1) -> dict[EntityPair, int]:
    """
    Aggregate edge multiplicity per unordered entity pair.

    Args:
        graph: Graph produced by build_graph.
        workers: Number of partitions to count in parallel. Counting is
            associative, so the merged result equals the sequential one.

    Returns:
        Mapping of EntityPair to count. Counts sum to the graph's edge count.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    edges = list(graph.edges())
    if workers == 1 or len(edges) < 2:
        counts = count_edges(edges)
    else:
        chunks = _partition(edges, workers)
        logger.info("Counting %d edges in %d partitions", len(edges), len(chunks))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            partials = list(executor.map(count_edges, chunks))
        counts = merge_counts(partials)

    logger.info("Aggregated %d edges into %d pairs", len(edges), len(counts))
    return counts
