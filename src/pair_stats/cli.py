"""CLI for computing entity pair statistics."""

from __future__ import annotations

import json
import logging
import sys

import requests
from dotenv import load_dotenv

from common.cli_helpers import setup_logging
from ingest_pairs.read_pairs import load_entity_pairs
from pair_stats.config import get_config, load_config, set_config
from pair_stats.helpers import apply_overrides, parse_pair_stats_args
from pair_stats.pair_stats import run_pair_stats
from report_pairs.report_pairs import print_report, report_records

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_pair_stats_args(argv)

    setup_logging()
    load_dotenv()

    try:
        set_config(apply_overrides(load_config(args.config), args))
        config = get_config()

        pairs = load_entity_pairs(
            args.source,
            delimiter=config.delimiter,
            min_fields=config.min_fields,
            strict=config.strict,
            timeout=config.timeout,
        )
        result = run_pair_stats(pairs, threshold=config.threshold, workers=config.workers)
    except (OSError, ValueError, requests.RequestException) as exc:
        logger.error("Pair stats run failed: %s", exc)
        sys.exit(1)

    if args.json:
        for record in report_records(result):
            print(json.dumps(record, ensure_ascii=False))
    else:
        print_report(result)


if __name__ == "__main__":
    main()
