"""Tests for the statsmodels fits."""

import numpy as np
import pandas as pd
import pytest

from dataviz_workshop.analysis import regression
from dataviz_workshop.data_processing.tidy import prepare_health_survey


def test_fuel_economy_model_recovers_slope():
    displ = np.linspace(1.5, 6.5, 20)
    df = pd.DataFrame({"displ": displ, "cty": 35 - 3 * displ})
    result = regression.fit_fuel_economy_model(df)
    assert result.params["displ"] == pytest.approx(-3.0)
    assert result.params["Intercept"] == pytest.approx(35.0)


def test_diabetes_model_drops_missing_rows(health_survey_df):
    survey = prepare_health_survey(health_survey_df)
    result = regression.fit_diabetes_model(survey)
    assert set(result.params.index) == {"Intercept", "BMI", "Age"}
    assert result.nobs == len(survey[["Diabetes", "BMI", "Age"]].dropna())


def test_diabetes_model_requires_columns(health_survey_df):
    with pytest.raises(ValueError) as exc_info:
        regression.fit_diabetes_model(health_survey_df, predictors=("BMI", "Pulse"))
    assert "Pulse" in str(exc_info.value)


def test_diabetes_model_needs_both_outcomes():
    df = pd.DataFrame({"Diabetes": ["No"] * 5, "BMI": [20, 25, 30, 35, 40], "Age": [30, 40, 50, 60, 70]})
    with pytest.raises(ValueError):
        regression.fit_diabetes_model(df)


def test_run_regression_analysis_writes_summaries(fuel_economy_df, health_survey_df, tmp_path):
    frames = {"fuel_economy": fuel_economy_df, "health_survey": prepare_health_survey(health_survey_df)}
    written = regression.run_regression_analysis(frames, tmp_path)
    assert set(written) == {"fuel_economy_ols", "diabetes_logit"}
    assert "OLS Regression Results" in written["fuel_economy_ols"].read_text(encoding="utf-8")
    assert "Logit Regression Results" in written["diabetes_logit"].read_text(encoding="utf-8")


def test_run_regression_analysis_skips_missing_and_failing(fuel_economy_df, tmp_path, caplog):
    bad_survey = pd.DataFrame({"Diabetes": ["No", "No"], "BMI": [20.0, 30.0], "Age": [30, 40]})
    written = regression.run_regression_analysis({"health_survey": bad_survey}, tmp_path)
    assert written == {}
    assert "No fuel_economy data available" in caplog.text
    assert "Error fitting diabetes_logit" in caplog.text
