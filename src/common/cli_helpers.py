"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_non_negative_int(value: str, field_name: str = "value") -> int:
    """Parse a non-negative integer for argparse arguments.

    Args:
        value: Raw string from the command line.
        field_name: Name of the field for error messages.

    Returns:
        Parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 0.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an integer") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"{field_name} must be >= 0")
    return parsed


DELIMITER_ESCAPES = {
    "\\t": "\t",
    "tab": "\t",
    "\\\\": "\\",
}


def parse_delimiter(value: str) -> str:
    """Parse a delimiter argument; '\\t' or 'tab' means a tab, anything else is literal."""
    if not value:
        raise argparse.ArgumentTypeError("delimiter must not be empty")
    return DELIMITER_ESCAPES.get(value, value)
