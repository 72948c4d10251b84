"""
High‑level pipeline orchestration functions.

Each function in this module coordinates a distinct stage of the
workshop.  The functions call into lower‑level modules defined in
`data_collection`, `data_processing` and `analysis`.  Use these
functions from the scripts in ``scripts/`` or import them into a
notebook and run the stages cell by cell.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from . import config
from .data_collection import datasets
from .data_processing import tidy
from .analysis import regression, visualizations
from .utils.file_io import read_csv, write_csv, write_json

PROCESSED_FILES = {
    "fuel_economy": "fuel_economy.csv",
    "health_survey": "health_survey.csv",
}


def run_data_collection(force: bool = False, names: Iterable[str] | None = None, progress: bool = True) -> dict[str, Path]:
    """Download the workshop datasets into `config.RAW_DATA_DIR`.

    Cached files are reused unless ``force`` is set.
    """
    paths = {}
    for name in datasets.DATASETS if names is None else names:
        logging.info("Collecting %s dataset…", name)
        paths[name] = datasets.download_dataset(
            name, output_dir=config.RAW_DATA_DIR, force=force, progress=progress
        )
    return paths


def run_data_processing() -> dict[str, Path]:
    """Build the working tables used by the charts.

    Reads the raw CSVs from `config.RAW_DATA_DIR` (downloading them if
    needed) and writes to `config.PROCESSED_DATA_DIR`:

    - ``fuel_economy.csv``: the vehicle table with ordered categories.
    - ``health_survey.csv``: one row per survey participant.
    - ``health_survey_missing.csv``: missing-value counts per column.
    - ``summary.json``: row counts before and after deduplication.
    """
    out_dir = config.PROCESSED_DATA_DIR

    logging.info("Preparing fuel economy data…")
    fuel_raw = datasets.load_fuel_economy(data_dir=config.RAW_DATA_DIR)
    fuel = tidy.prepare_fuel_economy(fuel_raw)

    logging.info("Deduplicating health survey participants…")
    survey_raw = datasets.load_health_survey(data_dir=config.RAW_DATA_DIR)
    survey = tidy.prepare_health_survey(survey_raw)

    written = {
        "fuel_economy": write_csv(fuel, out_dir / PROCESSED_FILES["fuel_economy"]),
        "health_survey": write_csv(survey, out_dir / PROCESSED_FILES["health_survey"]),
        "health_survey_missing": write_csv(
            tidy.describe_missing(survey), out_dir / "health_survey_missing.csv"
        ),
    }
    summary = {
        "fuel_economy": {"rows": len(fuel)},
        "health_survey": {
            "raw_rows": len(survey_raw),
            "participants": len(survey),
            "duplicates_removed": len(survey_raw) - len(survey),
        },
    }
    written["summary"] = write_json(summary, out_dir / "summary.json")
    return written


def load_processed_datasets() -> dict[str, pd.DataFrame]:
    """Read the working tables back, restoring category orders lost in CSV."""
    loaded = {}
    for name, filename in PROCESSED_FILES.items():
        path = config.PROCESSED_DATA_DIR / filename
        if not path.exists():
            logging.warning("Processed %s data not found at %s", name, path)
            continue
        df = read_csv(path, low_memory=False)
        if name == "fuel_economy":
            df = tidy.prepare_fuel_economy(df)
        else:
            df = tidy.apply_category_orders(df, datasets.get_source(name).category_orders)
        loaded[name] = df
    return loaded


def run_analysis(sections: Iterable[str] | None = None, regression_models: bool = True, output_dir: Path | None = None) -> dict[str, list[Path]]:
    """Render the workshop figures and fit the supporting models.

    Figures and ``index.md`` go to ``output_dir`` (default
    `config.FIGURES_DIR`); model summaries go to `config.RESULTS_DIR`.
    """
    frames = load_processed_datasets()
    if not frames:
        logging.error("No processed datasets found in %s; run the processing stage first", config.PROCESSED_DATA_DIR)
        return {}

    figures_dir = Path(output_dir) if output_dir is not None else config.FIGURES_DIR
    selected = visualizations.select_sections(sections)

    logging.info("Generating visualisations…")
    rendered = visualizations.generate_plots(frames, figures_dir, selected)
    index = visualizations.write_index(selected, rendered, figures_dir)
    logging.info("Wrote workshop index to %s", index)

    if regression_models:
        logging.info("Running regression analysis…")
        regression.run_regression_analysis(frames, config.RESULTS_DIR)
    return rendered


def run_all(force_download: bool = False) -> dict[str, list[Path]]:
    """Run collection, processing and analysis in order."""
    run_data_collection(force=force_download)
    run_data_processing()
    return run_analysis()
