#!/usr/bin/env python3
"""Run the category analysis on a JSON dump of transactions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from finance_tracker.schemas.transactions import TransactionSchema
from finance_tracker.services.analytics import analyze_by_category

LOGGER = logging.getLogger("analyze")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Group transactions by category and print the summary as JSON."
    )
    parser.add_argument(
        "path",
        type=Path,
        help="JSON file: a list of transactions or a Bridge {'resources': [...]} payload.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Indentation of the JSON output (default: 2).",
    )
    return parser.parse_args()


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    args = parse_args()

    LOGGER.info("Loading transactions from %s", args.path)
    payload = json.loads(args.path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("resources") or []

    try:
        transactions = TypeAdapter(list[TransactionSchema]).validate_python(payload)
    except ValidationError as exc:
        LOGGER.error("Invalid transactions in %s:\n%s", args.path, exc)
        return 1

    analysis = analyze_by_category(transactions)
    LOGGER.info(
        "%d transactions, %d categories",
        analysis.summary.transaction_count,
        len(analysis.categories),
    )
    print(analysis.model_dump_json(by_alias=True, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
