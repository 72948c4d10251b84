"""
Regression models behind the workshop's trend lines.

The smoothed layers in the charts are fitted by seaborn on the fly.
This module fits the same relationships explicitly with statsmodels so
the slides can quote coefficients: an ordinary least squares fit of city
fuel economy on engine displacement, and a logistic regression of
diabetes status on BMI and age.
"""

import logging
from pathlib import Path

import pandas as pd
import statsmodels.formula.api as smf

from ..utils.file_io import write_text


def fit_fuel_economy_model(df, formula="cty ~ displ"):
    """Fit an OLS model of fuel economy and return the statsmodels results."""
    logging.info("Fitting OLS regression: %s", formula)
    return smf.ols(formula=formula, data=df).fit()


def fit_diabetes_model(df, predictors=("BMI", "Age")):
    """Fit a logistic regression of ``Diabetes == "Yes"`` on ``predictors``.

    Rows missing the outcome or any predictor are dropped first.
    """
    predictors = list(predictors)
    missing = [c for c in ["Diabetes"] + predictors if c not in df.columns]
    if missing:
        raise ValueError(f"Health survey data must contain column(s): {', '.join(missing)}")

    model_df = df[["Diabetes"] + predictors].dropna()
    model_df = model_df.assign(diabetic=model_df["Diabetes"].eq("Yes").astype(int))
    if model_df["diabetic"].nunique() < 2:
        raise ValueError("Diabetes outcome has a single level after dropping missing rows")

    formula = "diabetic ~ " + " + ".join(predictors)
    logging.info("Fitting logistic regression on %d rows: %s", len(model_df), formula)
    return smf.logit(formula=formula, data=model_df).fit(disp=False)


def run_regression_analysis(datasets, output_dir):
    """Fit the workshop models and write their summaries.

    Parameters
    ----------
    datasets : Mapping[str, pandas.DataFrame]
        Working tables keyed by dataset name (``fuel_economy``,
        ``health_survey``).  Models whose table is absent are skipped.
    output_dir : Path or str
        Directory where model summaries should be saved.

    Returns
    -------
    dict
        Model name -> path of the written summary.
    """
    output_dir = Path(output_dir)
    models = {
        "fuel_economy_ols": ("fuel_economy", fit_fuel_economy_model),
        "diabetes_logit": ("health_survey", fit_diabetes_model),
    }
    written = {}
    for model_name, (dataset, fit) in models.items():
        df = datasets.get(dataset)
        if not isinstance(df, pd.DataFrame):
            logging.warning("No %s data available; skipping %s", dataset, model_name)
            continue
        try:
            result = fit(df)
        except Exception as exc:
            logging.error("Error fitting %s: %s", model_name, exc)
            continue
        path = output_dir / f"{model_name}_summary.txt"
        written[model_name] = write_text(result.summary().as_text(), path)
        logging.info("Wrote %s summary to %s", model_name, path)
    return written
