"""Shared fixtures: small synthetic versions of the two workshop tables."""

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from dataviz_workshop.data_collection.datasets import EDUCATION_LEVELS, VEHICLE_CLASSES  # noqa: E402


@pytest.fixture
def fuel_economy_df():
    """28 cars covering every vehicle class, drive train and cylinder count."""
    n = 28
    rng = np.random.default_rng(7)
    displ = np.round(np.linspace(1.6, 6.5, n), 1)
    cty = np.round(32 - 3 * displ + rng.normal(0, 1.0, n)).astype(int)
    return pd.DataFrame({
        "manufacturer": [["audi", "ford", "toyota", "honda"][i % 4] for i in range(n)],
        "model": [f"model {i}" for i in range(n)],
        "displ": displ,
        "year": [1999 if i % 2 else 2008 for i in range(n)],
        "cyl": [[4, 6, 8, 5][i % 4] for i in range(n)],
        "trans": ["auto(l4)" if i % 3 else "manual(m5)" for i in range(n)],
        "drv": [["f", "r", "4"][i % 3] for i in range(n)],
        "cty": cty,
        "hwy": cty + 7,
        "fl": ["r" if i % 5 else "p" for i in range(n)],
        "class": [VEHICLE_CLASSES[i % len(VEHICLE_CLASSES)] for i in range(n)],
    })


@pytest.fixture
def health_survey_df():
    """60 survey rows for 45 participants; the first 15 appear twice.

    The repeated rows carry ``SurveyYr == "2011_12"`` so tests can tell
    which occurrence was kept.
    """
    rng = np.random.default_rng(42)
    n_unique = 45
    ids = np.arange(51624, 51624 + n_unique)
    age = rng.integers(5, 80, n_unique)
    bmi = np.round(rng.normal(27, 5, n_unique), 1)
    bmi[[3, 17]] = np.nan
    education = np.array(
        [EDUCATION_LEVELS[i % len(EDUCATION_LEVELS)] for i in range(n_unique)], dtype=object
    )
    education[age < 20] = np.nan
    diabetes = np.array(["Yes" if i % 4 == 0 else "No" for i in range(n_unique)], dtype=object)
    diabetes[[5, 22]] = np.nan
    base = pd.DataFrame({
        "ID": ids,
        "SurveyYr": "2009_10",
        "Gender": ["female" if i % 2 else "male" for i in range(n_unique)],
        "Age": age,
        "Education": education,
        "BMI": bmi,
        "Diabetes": diabetes,
    })
    repeats = base.iloc[:15].assign(SurveyYr="2011_12")
    return pd.concat([base, repeats], ignore_index=True)


@pytest.fixture
def raw_dir(tmp_path, fuel_economy_df, health_survey_df):
    """Directory laid out like ``config.RAW_DATA_DIR`` after a download."""
    raw = tmp_path / "raw"
    raw.mkdir()
    for df, name in ((fuel_economy_df, "mpg.csv"), (health_survey_df, "NHANES.csv")):
        out = df.copy()
        out.insert(0, "rownames", range(1, len(out) + 1))
        out.to_csv(raw / name, index=False)
    return raw


@pytest.fixture
def workshop_dirs(tmp_path, raw_dir, monkeypatch):
    """Point every config directory at a temporary tree."""
    from dataviz_workshop import config

    dirs = {
        "RAW_DATA_DIR": raw_dir,
        "PROCESSED_DATA_DIR": tmp_path / "processed",
        "RESULTS_DIR": tmp_path / "results",
        "FIGURES_DIR": tmp_path / "results" / "figures",
    }
    for name, path in dirs.items():
        monkeypatch.setattr(config, name, path)
    return dirs
