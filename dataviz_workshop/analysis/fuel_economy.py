"""
Workshop sections built on the fuel-economy table.

The sections introduce the grammar one idea at a time: map two columns
to the axes, add colour/size/shape mappings, swap the geometric layer,
split the data into facets and finally polish labels and themes.
"""

from __future__ import annotations

from functools import partial

from ..data_collection.datasets import DRIVE_TRAINS, VEHICLE_CLASSES
from ..data_processing.tidy import summarise_by_group
from .charts import ChartSpec, Section

DATASET = "fuel_economy"

SEABORN_TUTORIAL = "https://seaborn.pydata.org/tutorial"


def first_plot() -> Section:
    return Section(
        slug="01-first-plot",
        title="Your first plot",
        dataset=DATASET,
        narrative=(
            "Every chart starts with a table and a mapping from columns to "
            "positions. Here engine displacement goes on the x axis and city "
            "fuel economy on the y axis: bigger engines burn more fuel."
        ),
        charts=[ChartSpec(name="displ_vs_cty", kind="scatter", x="displ", y="cty")],
        resources=[("Overview of seaborn plotting functions", f"{SEABORN_TUTORIAL}/function_overview.html")],
    )


def aesthetics() -> Section:
    return Section(
        slug="02-aesthetics",
        title="Mapping more variables: colour, size and shape",
        dataset=DATASET,
        narrative=(
            "Position is only one channel. Colour (hue), marker size and "
            "marker shape (style) can each carry another column. The two-seater "
            "outliers on the right stand out once points are coloured by class."
        ),
        charts=[
            ChartSpec(name="displ_vs_cty_by_class", kind="scatter", x="displ", y="cty", hue="class"),
            ChartSpec(
                name="displ_vs_hwy_by_cyl_and_drv",
                kind="scatter",
                x="displ",
                y="hwy",
                size="cyl",
                style="drv",
                options={"alpha": 0.7},
            ),
        ],
        resources=[("Visualizing statistical relationships", f"{SEABORN_TUTORIAL}/relational.html")],
    )


def geometric_layers() -> Section:
    return Section(
        slug="03-geometric-layers",
        title="Choosing a geometric layer",
        dataset=DATASET,
        narrative=(
            "The same mapping can be drawn with different geometries. A "
            "smoothed trend summarises the scatter, a histogram shows the "
            "distribution of one variable, box plots compare distributions "
            "across groups and bars show counts or pre-computed summaries."
        ),
        charts=[
            ChartSpec(name="displ_vs_cty_trend", kind="smooth", x="displ", y="cty", method="lowess"),
            ChartSpec(name="cty_histogram", kind="hist", x="cty", bins=20),
            ChartSpec(name="cty_by_class_box", kind="box", x="class", y="cty", order=VEHICLE_CLASSES, aspect=1.8),
            ChartSpec(name="class_counts", kind="count", x="class", order=VEHICLE_CLASSES, aspect=1.8),
            ChartSpec(
                name="mean_cty_by_class",
                kind="bar",
                x="class",
                y="mean",
                order=VEHICLE_CLASSES,
                ylabel="Mean city fuel economy (mpg)",
                transform=partial(summarise_by_group, by="class", value="cty"),
                options={"errorbar": None},
                aspect=1.8,
            ),
        ],
        resources=[
            ("Visualizing distributions of data", f"{SEABORN_TUTORIAL}/distributions.html"),
            ("Visualizing categorical data", f"{SEABORN_TUTORIAL}/categorical.html"),
        ],
    )


def facets() -> Section:
    return Section(
        slug="04-facets",
        title="Small multiples with facets",
        dataset=DATASET,
        narrative=(
            "Instead of squeezing every group into one panel, split the data "
            "into a grid of panels that share axes. Wrap a single variable "
            "over several rows, or cross two variables as rows and columns."
        ),
        charts=[
            ChartSpec(name="displ_vs_hwy_by_class", kind="scatter", x="displ", y="hwy", col="class", col_wrap=4, height=3.0),
            ChartSpec(
                name="displ_vs_hwy_drv_by_cyl",
                kind="scatter",
                x="displ",
                y="hwy",
                col="drv",
                row="cyl",
                height=2.5,
                options={"col_order": DRIVE_TRAINS},
            ),
        ],
        resources=[("Building structured multi-plot grids", f"{SEABORN_TUTORIAL}/axis_grids.html")],
    )


def themes() -> Section:
    return Section(
        slug="05-themes",
        title="Labels and themes",
        dataset=DATASET,
        narrative=(
            "A chart for an audience needs a title, readable axis labels and "
            "a theme that suits the medium. Styles change the background and "
            "grid; contexts scale fonts and lines for paper, notebooks, talks "
            "or posters."
        ),
        charts=[
            ChartSpec(
                name="displ_vs_cty_dark_talk",
                kind="scatter",
                x="displ",
                y="cty",
                hue="drv",
                hue_order=DRIVE_TRAINS,
                title="Bigger engines, fewer miles per gallon",
                xlabel="Engine displacement (litres)",
                ylabel="City miles per gallon",
                theme="dark",
                context="talk",
                palette="Set2",
                aspect=1.5,
            ),
            ChartSpec(
                name="hwy_by_drv_ticks",
                kind="violin",
                x="drv",
                y="hwy",
                order=DRIVE_TRAINS,
                title="Highway fuel economy by drive train",
                theme="ticks",
                context="paper",
            ),
        ],
        resources=[("Controlling figure aesthetics", f"{SEABORN_TUTORIAL}/aesthetics.html")],
    )


def sections() -> list[Section]:
    """Fuel-economy sections in teaching order."""
    return [first_plot(), aesthetics(), geometric_layers(), facets(), themes()]
