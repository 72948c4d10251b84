"""
Project configuration settings.

Edit the variables in this module (or set the matching ``DATAVIZ_*``
environment variables / ``.env`` entries) to point the workshop at other
data mirrors or to change how figures look.  Keeping configuration in
one place makes it easy to override default behaviour without modifying
individual modules.
"""

from pathlib import Path
import os

from dotenv import load_dotenv

load_dotenv()

# Base directory for storing input and output data.
BASE_DIR: Path = Path(__file__).resolve().parents[1]

###############################################################################
# Dataset sources
###############################################################################

# Both workshop tables are fetched as CSV from the Rdatasets mirror.
DATASET_BASE_URL: str = os.getenv(
    "DATAVIZ_DATASET_BASE_URL", "https://vincentarelbundock.github.io/Rdatasets/csv"
).rstrip("/")

FUEL_ECONOMY_URL: str = os.getenv("DATAVIZ_FUEL_ECONOMY_URL", f"{DATASET_BASE_URL}/ggplot2/mpg.csv")
HEALTH_SURVEY_URL: str = os.getenv("DATAVIZ_HEALTH_SURVEY_URL", f"{DATASET_BASE_URL}/NHANES/NHANES.csv")

# Seconds to wait for the mirror before giving up on a request.
REQUEST_TIMEOUT: float = float(os.getenv("DATAVIZ_REQUEST_TIMEOUT", "30"))

###############################################################################
# Directory paths
###############################################################################

# Downloaded CSVs, exactly as served by the mirror
RAW_DATA_DIR: Path = BASE_DIR / "data" / "raw"

# Tidied working tables (deduplicated survey etc.)
PROCESSED_DATA_DIR: Path = BASE_DIR / "data" / "processed"

# Model summaries and the rendered workshop
RESULTS_DIR: Path = BASE_DIR / "results"
FIGURES_DIR: Path = RESULTS_DIR / "figures"

# Create directories if they do not already exist
for _dir in (RAW_DATA_DIR, PROCESSED_DATA_DIR, RESULTS_DIR, FIGURES_DIR):
    _dir.mkdir(parents=True, exist_ok=True)

###############################################################################
# Figure defaults
###############################################################################

# Passed to seaborn.axes_style / seaborn.plotting_context for every chart
THEME_STYLE: str = os.getenv("DATAVIZ_THEME_STYLE", "whitegrid")
THEME_CONTEXT: str = os.getenv("DATAVIZ_THEME_CONTEXT", "notebook")
PALETTE: str = os.getenv("DATAVIZ_PALETTE", "colorblind")
FIGURE_DPI: int = int(os.getenv("DATAVIZ_FIGURE_DPI", "150"))

###############################################################################
# Logging
###############################################################################

LOG_LEVEL: str = os.getenv("DATAVIZ_LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
