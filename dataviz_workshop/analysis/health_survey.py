"""
Workshop sections built on the health-survey table.

These sections assume the deduplicated working table produced by
``tidy.prepare_health_survey``: one row per participant and an ordered
``Education`` column.
"""

from __future__ import annotations

from functools import partial

from ..data_collection.datasets import EDUCATION_LEVELS
from ..data_processing.tidy import proportion_by_group
from .charts import ChartSpec, Section

DATASET = "health_survey"

SEABORN_TUTORIAL = "https://seaborn.pydata.org/tutorial"
NHANES_HOME = "https://www.cdc.gov/nchs/nhanes/index.htm"


def deduplication() -> Section:
    return Section(
        slug="06-deduplication",
        title="One row per participant",
        dataset=DATASET,
        narrative=(
            "The survey extract repeats participants to correct for "
            "oversampling. Before describing people we keep only the first "
            "row for each participant ID, then look at the BMI distribution."
        ),
        charts=[ChartSpec(name="bmi_histogram", kind="hist", x="BMI", bins=40, dropna=("BMI",))],
        resources=[("About the survey", NHANES_HOME)],
    )


def missing_data() -> Section:
    return Section(
        slug="07-missing-data",
        title="Dealing with missing values",
        dataset=DATASET,
        narrative=(
            "Education is only recorded for adults, so children show up as a "
            "missing category. Dropping rows with missing education or BMI "
            "keeps the comparison to the people it is about."
        ),
        charts=[
            ChartSpec(
                name="bmi_by_education_box",
                kind="box",
                x="Education",
                y="BMI",
                order=EDUCATION_LEVELS,
                dropna=("Education", "BMI"),
                aspect=1.8,
            )
        ],
    )


def summaries() -> Section:
    return Section(
        slug="08-summaries",
        title="Grouping and summarising",
        dataset=DATASET,
        narrative=(
            "Some charts need a summary table instead of raw rows. Group by "
            "education, compute the share of participants with diabetes and "
            "plot one bar per group."
        ),
        charts=[
            ChartSpec(
                name="diabetes_by_education",
                kind="bar",
                x="Education",
                y="proportion",
                order=EDUCATION_LEVELS,
                ylabel="Share with diabetes",
                dropna=("Education",),
                transform=partial(
                    proportion_by_group,
                    group_column="Education",
                    outcome_column="Diabetes",
                    positive="Yes",
                ),
                options={"errorbar": None},
                aspect=1.8,
            )
        ],
        resources=[("Statistical estimation and error bars", f"{SEABORN_TUTORIAL}/error_bars.html")],
    )


def relationships() -> Section:
    return Section(
        slug="09-relationships",
        title="Relationships between measurements",
        dataset=DATASET,
        narrative=(
            "With thousands of points, transparency helps show where the "
            "data are dense. A smoothed trend per gender summarises how BMI "
            "changes with age."
        ),
        charts=[
            ChartSpec(
                name="age_vs_bmi_by_diabetes",
                kind="scatter",
                x="Age",
                y="BMI",
                hue="Diabetes",
                hue_order=["No", "Yes"],
                dropna=("Age", "BMI", "Diabetes"),
                options={"alpha": 0.3, "s": 12},
            ),
            ChartSpec(
                name="age_vs_bmi_trend_by_gender",
                kind="smooth",
                x="Age",
                y="BMI",
                hue="Gender",
                method="lowess",
                dropna=("Age", "BMI", "Gender"),
                options={"scatter_kws": {"alpha": 0.15, "s": 8}},
            ),
        ],
        resources=[("Estimating regression fits", f"{SEABORN_TUTORIAL}/regression.html")],
    )


def facets() -> Section:
    return Section(
        slug="10-survey-facets",
        title="Comparing distributions across panels",
        dataset=DATASET,
        narrative=(
            "Facets and colour combine: one panel per gender, with the BMI "
            "density of participants with and without diabetes overlaid. "
            "Each group is normalised separately so their shapes compare."
        ),
        charts=[
            ChartSpec(
                name="bmi_density_by_diabetes_and_gender",
                kind="hist",
                x="BMI",
                hue="Diabetes",
                hue_order=["No", "Yes"],
                col="Gender",
                bins=30,
                dropna=("BMI", "Diabetes", "Gender"),
                options={"stat": "density", "common_norm": False, "element": "step"},
            )
        ],
    )


def sections() -> list[Section]:
    """Health-survey sections in teaching order."""
    return [deduplication(), missing_data(), summaries(), relationships(), facets()]
