"""Data models for the pair_stats pipeline run."""

from dataclasses import dataclass, field

from aggregate_pairs.models import AggregatedPair, EntityPair


@dataclass
class PairStatsResult:
    """Output of one pipeline run over a pair sequence."""

    threshold: int
    node_count: int
    edge_count: int
    components: list[frozenset[str]] = field(default_factory=list)
    aggregated: dict[EntityPair, int] = field(default_factory=dict)
    popular_pairs: list[AggregatedPair] = field(default_factory=list)
