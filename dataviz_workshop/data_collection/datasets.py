"""
Download and load the two workshop datasets.

The workshop works from two reference tables that are distributed as R
datasets and mirrored as plain CSV:

* ``fuel_economy`` -- the ggplot2 ``mpg`` table: 234 cars with their
  manufacturer, engine displacement, drive train and city/highway miles
  per gallon.
* ``health_survey`` -- the NHANES survey extract: 10 000 rows of
  per-participant measurements (BMI, education, diabetes status...).
  The extract was resampled to correct for the survey's oversampling, so
  the same participant ``ID`` appears on several rows.

Files are cached in ``config.RAW_DATA_DIR`` and only downloaded when
missing (or when ``force=True``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import pandas as pd
import requests
from retrying import retry
from tqdm import tqdm

from .. import config
from ..utils.file_io import read_csv

LOG = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

# Index column written by the mirror's CSV export (or by pandas when a frame
# was saved with its index).
ROWNAME_COLUMNS = ("rownames", "Unnamed: 0")

EDUCATION_LEVELS = [
    "8th Grade",
    "9 - 11th Grade",
    "High School",
    "Some College",
    "College Grad",
]

VEHICLE_CLASSES = [
    "2seater",
    "compact",
    "midsize",
    "minivan",
    "pickup",
    "subcompact",
    "suv",
]

DRIVE_TRAINS = ["f", "r", "4"]


@dataclass(frozen=True)
class DatasetSource:
    """Where a dataset lives and what a usable copy of it looks like."""

    name: str
    url: str
    filename: str
    required_columns: Sequence[str]
    id_column: str | None = None
    category_orders: Mapping[str, Sequence[str]] = field(default_factory=dict)


DATASETS: dict[str, DatasetSource] = {
    "fuel_economy": DatasetSource(
        name="fuel_economy",
        url=config.FUEL_ECONOMY_URL,
        filename="mpg.csv",
        required_columns=(
            "manufacturer",
            "model",
            "displ",
            "year",
            "cyl",
            "trans",
            "drv",
            "cty",
            "hwy",
            "fl",
            "class",
        ),
        category_orders={"class": VEHICLE_CLASSES, "drv": DRIVE_TRAINS},
    ),
    "health_survey": DatasetSource(
        name="health_survey",
        url=config.HEALTH_SURVEY_URL,
        filename="NHANES.csv",
        required_columns=("ID", "SurveyYr", "Gender", "Age", "Education", "BMI", "Diabetes"),
        id_column="ID",
        category_orders={"Education": EDUCATION_LEVELS},
    ),
}


def get_source(name: str) -> DatasetSource:
    """Return the registered source called ``name``."""
    try:
        return DATASETS[name]
    except KeyError:
        known = ", ".join(sorted(DATASETS))
        raise KeyError(f"Unknown dataset '{name}'. Known datasets: {known}") from None


def _is_transient(exc: BaseException) -> bool:
    """Retry on dropped connections, timeouts, rate limiting and 5xx."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status = exc.response.status_code
        return status == 429 or 500 <= status < 600
    return False


@retry(
    stop_max_attempt_number=3,
    wait_exponential_multiplier=250,
    wait_exponential_max=4000,
    retry_on_exception=_is_transient,
)
def _stream_to_file(url: str, destination: Path, progress: bool) -> int:
    """Stream ``url`` into ``destination`` via a ``.part`` file; return bytes written."""
    LOG.info("GET %s", url)
    partial = destination.with_name(destination.name + ".part")
    written = 0
    with requests.get(url, stream=True, timeout=config.REQUEST_TIMEOUT) as resp:
        if resp.status_code >= 400:
            LOG.warning("HTTP %s from %s", resp.status_code, url)
        resp.raise_for_status()
        total = int(resp.headers.get("content-length") or 0) or None
        with partial.open("wb") as fh, tqdm(
            total=total,
            unit="B",
            unit_scale=True,
            desc=destination.name,
            leave=False,
            disable=not progress,
        ) as bar:
            for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                if not chunk:
                    continue
                fh.write(chunk)
                written += len(chunk)
                bar.update(len(chunk))
    partial.replace(destination)
    return written


def download_dataset(
    name: str,
    output_dir: Path | None = None,
    force: bool = False,
    progress: bool = True,
) -> Path:
    """Download dataset ``name`` into ``output_dir`` and return the CSV path.

    Parameters
    ----------
    name : str
        Registered dataset name (see ``DATASETS``).
    output_dir : Path or None
        Cache directory; defaults to ``config.RAW_DATA_DIR``.
    force : bool
        Re-download even when a cached copy exists.
    progress : bool
        Show a tqdm progress bar while streaming.

    Notes
    -----
    Connection errors, timeouts, HTTP 429 and 5xx responses are retried
    with exponential backoff; any other HTTP error is raised as
    ``requests.HTTPError`` and no file is left behind.
    """
    source = get_source(name)
    output_dir = Path(output_dir) if output_dir is not None else config.RAW_DATA_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    destination = output_dir / source.filename

    if destination.exists() and not force:
        LOG.info("Using cached %s dataset at %s", name, destination)
        return destination

    try:
        written = _stream_to_file(source.url, destination, progress)
    except requests.RequestException as exc:
        LOG.error("Failed to download %s from %s: %s", name, source.url, exc)
        partial = destination.with_name(destination.name + ".part")
        if partial.exists():
            partial.unlink()
        raise
    LOG.info("Saved %s dataset (%d bytes) to %s", name, written, destination)
    return destination


def validate_columns(df: pd.DataFrame, required: Iterable[str], name: str) -> None:
    """Raise ``ValueError`` if ``df`` lacks any of the ``required`` columns."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(
            f"{name} is missing required column(s): {', '.join(missing)}. "
            f"Available columns: {list(df.columns)}"
        )


def load_dataset(name: str, data_dir: Path | None = None, download: bool = True) -> pd.DataFrame:
    """Load dataset ``name`` from the local cache, downloading it if needed."""
    source = get_source(name)
    data_dir = Path(data_dir) if data_dir is not None else config.RAW_DATA_DIR
    path = data_dir / source.filename
    if not path.exists():
        if not download:
            raise FileNotFoundError(f"{name} dataset not found at {path} and download is disabled")
        download_dataset(name, output_dir=data_dir)

    df = read_csv(path, low_memory=False)
    df = df.drop(columns=[c for c in ROWNAME_COLUMNS if c in df.columns])
    validate_columns(df, source.required_columns, name)
    LOG.info("Loaded %s: %d rows x %d columns", name, len(df), df.shape[1])
    return df


def load_fuel_economy(data_dir: Path | None = None, download: bool = True) -> pd.DataFrame:
    return load_dataset("fuel_economy", data_dir=data_dir, download=download)


def load_health_survey(data_dir: Path | None = None, download: bool = True) -> pd.DataFrame:
    return load_dataset("health_survey", data_dir=data_dir, download=download)
