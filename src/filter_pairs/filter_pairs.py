"""Select entity pairs whose co-occurrence count meets a threshold."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from aggregate_pairs.models import AggregatedPair, EntityPair

logger = logging.getLogger(__name__)


class InvalidThresholdError(ValueError):
    """Raised when a popularity threshold is not an integer >= 0."""


def validate_threshold(threshold: Any) -> int:
    """Return the threshold unchanged, or raise InvalidThresholdError."""
    # bool is an int subclass but never a meaningful count
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise InvalidThresholdError(f"threshold must be an integer, got {threshold!r}")
    if threshold < 0:
        raise InvalidThresholdError(f"threshold must be >= 0, got {threshold}")
    return threshold


def filter_popular_pairs(
    aggregated: Mapping[EntityPair, int],
    threshold: int,
) -> list[AggregatedPair]:
    """
    Keep pairs whose count is at least the threshold.

    Args:
        aggregated: Mapping of EntityPair to count from aggregate_pairs.
        threshold: Minimum count to keep (inclusive).

    Returns:
        AggregatedPair list sorted by count descending, then by pair.
    """
    validate_threshold(threshold)

    kept = [
        AggregatedPair(pair=pair, count=count)
        for pair, count in aggregated.items()
        if count >= threshold
    ]
    kept.sort(key=lambda item: (-item.count, item.pair))

    logger.info(
        "Kept %d of %d pairs with count >= %d",
        len(kept),
        len(aggregated),
        threshold,
    )
    return kept
