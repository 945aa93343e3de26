"""Split delimited co-occurrence lines into entity pair records."""

from __future__ import annotations

import logging
from typing import Iterable

from ingest_pairs.models import PairRecord

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"
DEFAULT_MIN_FIELDS = 3


class MalformedPairError(ValueError):
    """Raised in strict mode for a record that cannot yield an entity pair."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"Malformed record on line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


def _malformed_reason(fields: list[str], min_fields: int) -> str | None:
    if len(fields) < min_fields:
        return f"expected at least {min_fields} fields, got {len(fields)}"
    if not fields[0] or not fields[1]:
        return "empty entity identifier"
    return None


def parse_pair_records(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
    min_fields: int = DEFAULT_MIN_FIELDS,
    strict: bool = False,
) -> list[PairRecord]:
    """
    Parse delimited lines into pair records.

    The first two fields of each line are the entity identifiers and are
    kept verbatim. Blank lines are skipped.

    Args:
        lines: Raw text lines (with or without trailing newlines).
        delimiter: Field separator.
        min_fields: Minimum number of fields a record needs.
        strict: Raise on malformed records instead of dropping them.

    Returns:
        List of PairRecord in input order.

    Raises:
        MalformedPairError: In strict mode, for the first malformed record.
    """
    if min_fields < 2:
        raise ValueError(f"min_fields must be >= 2, got {min_fields}")

    records: list[PairRecord] = []
    dropped = 0

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        fields = line.split(delimiter)
        reason = _malformed_reason(fields, min_fields)
        if reason is not None:
            if strict:
                raise MalformedPairError(line_number, reason)
            logger.debug("Dropping line %d: %s", line_number, reason)
            dropped += 1
            continue
        records.append(
            PairRecord(
                entity_a=fields[0],
                entity_b=fields[1],
                fields=tuple(fields),
                line_number=line_number,
            )
        )

    if dropped:
        logger.warning("Dropped %d malformed records", dropped)
    logger.info("Parsed %d pair records", len(records))
    return records


def to_entity_pairs(records: Iterable[PairRecord]) -> list[tuple[str, str]]:
    """Extract the (entity_a, entity_b) tuples from parsed records."""
    return [(record.entity_a, record.entity_b) for record in records]
