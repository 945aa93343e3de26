"""Helper functions for pair_stats CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import parse_delimiter, parse_non_negative_int
from pair_stats.config import PairStatsConfig


def parse_pair_stats_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for pair_stats.'''

    parser = argparse.ArgumentParser(
        description="Compute connected components and popular entity pairs.",
    )

    # Input options
    parser.add_argument(
        "--source",
        required=True,
        help="Path or http(s) URL of delimited co-occurrence records",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or YAML path (default: $PAIR_STATS_CONFIG or 'prod')",
    )
    parser.add_argument("--delimiter", type=parse_delimiter, default=None, help="Field delimiter")
    parser.add_argument(
        "--min-fields",
        type=lambda v: parse_non_negative_int(v, "min-fields"),
        default=None,
        help="Minimum fields per record",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail on malformed records instead of dropping them",
    )
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")

    # Aggregation options
    parser.add_argument(
        "--threshold",
        type=lambda v: parse_non_negative_int(v, "threshold"),
        default=None,
        help="Minimum co-occurrence count to report",
    )
    parser.add_argument("--workers", type=int, default=None, help="Aggregation partitions")

    # Output options
    parser.add_argument("--json", action="store_true", help="Print popular pairs as JSON lines")

    return parser.parse_args(argv)


def apply_overrides(config: PairStatsConfig, args: argparse.Namespace) -> PairStatsConfig:
    '''Return a config with any CLI flags that were given applied.'''

    return PairStatsConfig(
        threshold=config.threshold if args.threshold is None else args.threshold,
        delimiter=config.delimiter if args.delimiter is None else args.delimiter,
        min_fields=config.min_fields if args.min_fields is None else args.min_fields,
        strict=config.strict if args.strict is None else args.strict,
        workers=config.workers if args.workers is None else args.workers,
        timeout=config.timeout if args.timeout is None else args.timeout,
    )
