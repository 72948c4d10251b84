#!/usr/bin/env python
"""Render the workshop figures, the Markdown index and the model summaries.

Usage examples (run from project root):
# Render every section into results/figures
# python scripts/3.render_workshop.py

# Re-render two sections into a scratch folder, skipping the models
# python scripts/3.render_workshop.py --section 04-facets 08-summaries --output /tmp/figs --no-regression
"""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend

from dataviz_workshop import config  # noqa: E402
from dataviz_workshop.analysis.visualizations import workshop_sections  # noqa: E402
from dataviz_workshop.pipelines import run_analysis  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    slugs = [s.slug for s in workshop_sections()]
    parser = argparse.ArgumentParser(description="Render the data visualisation workshop.")
    parser.add_argument("--section", nargs="*", choices=slugs, default=None, help="Sections to render (default: all)")
    parser.add_argument("--output", type=Path, default=None, help=f"Figure directory (default {config.FIGURES_DIR})")
    parser.add_argument("--no-regression", action="store_true", help="Skip fitting the regression models")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help=f"Logging level (default {config.LOG_LEVEL})")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=config.LOG_FORMAT)

    rendered = run_analysis(sections=args.section, regression_models=not args.no_regression, output_dir=args.output)
    if not rendered:
        logger.error("Nothing rendered; run scripts/2.prepare_datasets.py first")
        return 2
    total = sum(len(paths) for paths in rendered.values())
    logger.info("Rendered %d figures across %d sections", total, len(rendered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
