"""Partition a relationship graph into connected components."""

from __future__ import annotations

import logging
from typing import Sequence

import networkx as nx

logger = logging.getLogger(__name__)


def find_components(graph: nx.MultiGraph) -> list[frozenset[str]]:
    """
    Find the connected components of a relationship graph.

    Connectivity ignores edge multiplicity. Isolated nodes come back as
    singleton components. Components are ordered by the first node of each
    in node insertion order, so the result is stable for a given build.

    Args:
        graph: Graph produced by build_graph.

    Returns:
        List of components, each a frozenset of node identifiers.
    """
    components = [frozenset(component) for component in nx.connected_components(graph)]
    logger.info(
        "Found %d components across %d nodes",
        len(components),
        graph.number_of_nodes(),
    )
    return components


def largest_component(components: Sequence[frozenset[str]]) -> frozenset[str] | None:
    """Largest component, first one wins on ties; None when there are none."""
    if not components:
        return None
    return max(components, key=len)
