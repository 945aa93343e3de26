"""Build an undirected relationship multigraph from entity pairs."""

from __future__ import annotations

import logging
from typing import Iterable

import networkx as nx

logger = logging.getLogger(__name__)


def build_graph(pairs: Iterable[tuple[str, str]]) -> nx.MultiGraph:
    """
    Build a relationship graph with one edge per co-occurrence.

    Nodes are keyed by identifier value, so a repeated identifier reuses
    its existing node. Repeated pairs add parallel edges rather than
    incrementing a weight.

    Args:
        pairs: Sequence of (entity_a, entity_b) tuples.

    Returns:
        networkx.MultiGraph holding every observed co-occurrence.
    """
    graph = nx.MultiGraph()
    for entity_a, entity_b in pairs:
        # add_edge creates missing nodes and appends a parallel edge
        graph.add_edge(entity_a, entity_b)

    logger.info(
        "Graph constructed: %d nodes, %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def edge_count(graph: nx.MultiGraph) -> int:
    """Total number of edges, parallel edges included."""
    return graph.number_of_edges()
