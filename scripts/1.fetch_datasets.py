#!/usr/bin/env python
"""CLI entry point for downloading the workshop datasets.

Thin wrapper around
`dataviz_workshop.pipelines.run_data_collection`.

Both tables are cached in ``data/raw``; re-running the script reuses the
cached copies unless ``--force`` is given.  Point the script at another
mirror by setting ``DATAVIZ_DATASET_BASE_URL`` (or the per-dataset
``DATAVIZ_FUEL_ECONOMY_URL`` / ``DATAVIZ_HEALTH_SURVEY_URL``) in the
environment or a ``.env`` file.

Examples (run from project root)
    # Download whatever is not cached yet
    python scripts/1.fetch_datasets.py

    # Refresh only the survey table, without a progress bar
    python scripts/1.fetch_datasets.py --dataset health_survey --force --no-progress
"""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root (folder containing dataviz_workshop) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

import requests

from dataviz_workshop import config
from dataviz_workshop.data_collection.datasets import DATASETS
from dataviz_workshop.pipelines import run_data_collection


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Download the workshop datasets")
    p.add_argument("--dataset", nargs="*", choices=sorted(DATASETS), default=None, help="Datasets to fetch (default: all)")
    p.add_argument("--force", action="store_true", help="Re-download even when a cached copy exists")
    p.add_argument("--no-progress", action="store_true", help="Hide the download progress bar")
    p.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Logging level (default {config.LOG_LEVEL})")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=config.LOG_FORMAT)
    try:
        paths = run_data_collection(force=args.force, names=args.dataset, progress=not args.no_progress)
    except requests.RequestException:
        logging.exception("Dataset download failed")
        return 1
    for name, path in paths.items():
        logging.info("%s -> %s", name, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
