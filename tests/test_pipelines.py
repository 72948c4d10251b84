"""End-to-end tests of the pipeline stages on temporary directories."""

import json

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from dataviz_workshop import pipelines
from dataviz_workshop.data_collection import datasets


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_run_data_collection_downloads_each_dataset(workshop_dirs, monkeypatch):
    calls = []

    def fake_download(name, output_dir=None, force=False, progress=True):
        calls.append((name, output_dir, force))
        return output_dir / f"{name}.csv"

    monkeypatch.setattr(datasets, "download_dataset", fake_download)
    paths = pipelines.run_data_collection(force=True, progress=False)
    assert set(paths) == set(datasets.DATASETS)
    assert all(out == workshop_dirs["RAW_DATA_DIR"] and force for _, out, force in calls)


def test_run_data_collection_with_empty_names_downloads_nothing(workshop_dirs, monkeypatch):
    calls = []
    monkeypatch.setattr(datasets, "download_dataset", lambda name, **kwargs: calls.append(name))
    assert pipelines.run_data_collection(names=[]) == {}
    assert calls == []


def test_run_data_processing_writes_working_tables(workshop_dirs, health_survey_df):
    written = pipelines.run_data_processing()
    processed = workshop_dirs["PROCESSED_DATA_DIR"]
    assert set(written) == {"fuel_economy", "health_survey", "health_survey_missing", "summary"}
    assert all(path.parent == processed for path in written.values())

    survey = pd.read_csv(written["health_survey"])
    assert len(survey) == health_survey_df["ID"].nunique()
    assert survey["ID"].is_unique

    summary = json.loads(written["summary"].read_text(encoding="utf-8"))
    assert summary["health_survey"] == {
        "raw_rows": len(health_survey_df),
        "participants": health_survey_df["ID"].nunique(),
        "duplicates_removed": len(health_survey_df) - health_survey_df["ID"].nunique(),
    }

    missing = pd.read_csv(written["health_survey_missing"]).set_index("column")
    assert missing.loc["BMI", "n_missing"] == survey["BMI"].isna().sum()


def test_load_processed_datasets_restores_category_order(workshop_dirs):
    pipelines.run_data_processing()
    frames = pipelines.load_processed_datasets()
    assert set(frames) == {"fuel_economy", "health_survey"}
    assert frames["health_survey"]["Education"].cat.ordered
    assert list(frames["fuel_economy"]["drv"].cat.categories) == ["f", "r", "4"]


def test_load_processed_datasets_empty_when_not_prepared(workshop_dirs):
    assert pipelines.load_processed_datasets() == {}


def test_run_analysis_renders_selected_sections(workshop_dirs):
    pipelines.run_data_processing()
    rendered = pipelines.run_analysis(sections=["01-first-plot", "08-summaries"])
    figures = workshop_dirs["FIGURES_DIR"]
    assert set(rendered) == {"01-first-plot", "08-summaries"}
    assert (figures / "01-first-plot" / "displ_vs_cty.png").exists()
    assert (figures / "08-summaries" / "diabetes_by_education.png").exists()
    assert (figures / "index.md").exists()
    assert (workshop_dirs["RESULTS_DIR"] / "fuel_economy_ols_summary.txt").exists()


def test_run_analysis_without_processed_data(workshop_dirs, caplog):
    assert pipelines.run_analysis() == {}
    assert "run the processing stage first" in caplog.text
