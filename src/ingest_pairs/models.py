"""Data models for ingest_pairs pipeline stage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PairRecord:
    """Delimited input record with its two entity fields extracted."""
    entity_a: str
    entity_b: str
    fields: tuple[str, ...]
    line_number: int
