"""Data models for aggregate_pairs pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class EntityPair:
    """Unordered entity pair stored with the smaller identifier first."""

    first: str
    second: str

    def __post_init__(self) -> None:
        if self.first > self.second:
            raise ValueError(
                f"EntityPair must be canonical, got ({self.first!r}, {self.second!r}); "
                "use EntityPair.of()"
            )

    @classmethod
    def of(cls, entity_a: str, entity_b: str) -> EntityPair:
        """Build the canonical pair for two identifiers in either order."""
        if entity_b < entity_a:
            return cls(entity_b, entity_a)
        return cls(entity_a, entity_b)

    @property
    def label(self) -> str:
        return f"{self.first}-{self.second}"


@dataclass(frozen=True)
class AggregatedPair:
    """Entity pair with its total co-occurrence count."""

    pair: EntityPair
    count: int
