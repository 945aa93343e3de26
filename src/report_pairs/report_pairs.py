"""Textual report and plot series for pair statistics."""

from __future__ import annotations

from typing import Any, Sequence

from aggregate_pairs.models import AggregatedPair
from find_components.find_components import largest_component
from pair_stats.models import PairStatsResult


def to_plot_series(popular_pairs: Sequence[AggregatedPair]) -> tuple[list[str], list[int]]:
    """
    Reshape popular pairs into parallel label and frequency lists.

    Index i of the labels always matches index i of the frequencies.
    """
    labels = [item.pair.label for item in popular_pairs]
    frequencies = [item.count for item in popular_pairs]
    return labels, frequencies


def report_records(result: PairStatsResult) -> list[dict[str, Any]]:
    return [
        {"first": item.pair.first, "second": item.pair.second, "count": item.count}
        for item in result.popular_pairs
    ]


def format_report(result: PairStatsResult) -> str:
    largest = largest_component(result.components)
    lines = [
        f"Nodes: {result.node_count} | Edges: {result.edge_count} | "
        f"Components: {len(result.components)} | Threshold: {result.threshold}",
        f"Largest component: {len(largest) if largest else 0} nodes",
        "",
        "Components:",
    ]
    if not result.components:
        lines.append("- (none)")
    for index, component in enumerate(result.components, start=1):
        lines.append(f"- {index} ({len(component)}): {', '.join(sorted(component))}")

    lines.append("")
    lines.append(f"Pairs with count >= {result.threshold}:")
    if not result.popular_pairs:
        lines.append("- (none)")
    labels, frequencies = to_plot_series(result.popular_pairs)
    for label, frequency in zip(labels, frequencies, strict=True):
        lines.append(f"- {label}: {frequency}")

    return "\n".join(lines)


def print_report(result: PairStatsResult) -> None:
    print(format_report(result))
