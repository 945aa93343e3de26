import logging
from pathlib import Path

import requests

from ingest_pairs.models import PairRecord
from ingest_pairs.parse_pairs import (
    DEFAULT_DELIMITER,
    DEFAULT_MIN_FIELDS,
    parse_pair_records,
    to_entity_pairs,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_pair_lines(path: str | Path) -> list[str]:
    """Read raw lines from a local delimited file."""
    filepath = Path(path)
    with filepath.open(encoding="utf-8") as f:
        # iterating splits on newlines only, unlike str.splitlines()
        lines = [line.rstrip("\n") for line in f]
    logger.info("Read %d lines from %s", len(lines), filepath)
    return lines


def fetch_pair_lines(url: str, timeout: float = DEFAULT_TIMEOUT) -> list[str]:
    """
    Fetch raw lines over HTTP.

    A single GET; HTTP and transport errors are raised to the caller so a
    failed download never turns into an empty pair list.
    """
    response = requests.get(
        url,
        timeout=timeout,
        headers={"User-Agent": "pair-stats/1.0"},
    )
    response.raise_for_status()
    lines = response.text.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    logger.info("Fetched %d lines from %s", len(lines), url)
    return lines


def load_pair_records(
    source: str,
    delimiter: str = DEFAULT_DELIMITER,
    min_fields: int = DEFAULT_MIN_FIELDS,
    strict: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[PairRecord]:
    if is_url(source):
        lines = fetch_pair_lines(source, timeout=timeout)
    else:
        lines = read_pair_lines(source)
    return parse_pair_records(lines, delimiter=delimiter, min_fields=min_fields, strict=strict)


def load_entity_pairs(
    source: str,
    delimiter: str = DEFAULT_DELIMITER,
    min_fields: int = DEFAULT_MIN_FIELDS,
    strict: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[tuple[str, str]]:
    """
    Load entity pairs from a local path or an http(s) URL.

    Args:
        source: File path or URL of delimited co-occurrence records.
        delimiter: Field separator.
        min_fields: Minimum number of fields per record.
        strict: Raise MalformedPairError instead of dropping bad records.
        timeout: HTTP timeout in seconds (URL sources only).

    Returns:
        List of (entity_a, entity_b) tuples in input order.
    """
    records = load_pair_records(
        source,
        delimiter=delimiter,
        min_fields=min_fields,
        strict=strict,
        timeout=timeout,
    )
    return to_entity_pairs(records)
