#!/usr/bin/env python
"""Build the tidy working tables from the downloaded datasets.

Thin wrapper around `dataviz_workshop.pipelines.run_data_processing`:
deduplicates the survey participants, orders the categorical columns and
writes the results (plus a missing-value report and a row-count summary)
to ``data/processed``.

Usage (run from project root):
    python scripts/2.prepare_datasets.py
"""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from dataviz_workshop import config
from dataviz_workshop.pipelines import run_data_processing

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tidy the workshop datasets.")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Logging level (default {config.LOG_LEVEL})")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=config.LOG_FORMAT)

    try:
        written = run_data_processing()
    except (FileNotFoundError, ValueError):
        logger.exception("Failed to prepare datasets")
        return 2
    for name, path in written.items():
        logger.info("Wrote %s: %s", name, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
