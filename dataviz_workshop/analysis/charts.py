"""
Declarative chart specifications rendered with seaborn.

A ``ChartSpec`` records *what* to draw -- which columns map to the axes
and to colour/shape/size, which geometric layer to use, how to facet and
which theme to apply -- and ``render_chart`` hands it to the matching
seaborn figure-level function (``relplot``, ``displot``, ``catplot`` or
``lmplot``).  Every figure-level function returns a ``FacetGrid``, so
faceting by ``col``/``row`` works the same way for every kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from .. import config
from ..data_processing.tidy import drop_missing
from ..data_processing.utils import pretty_label

LOG = logging.getLogger(__name__)

# kind -> (seaborn function, value for its ``kind`` argument)
KINDS: dict[str, tuple[str, str | None]] = {
    "scatter": ("relplot", "scatter"),
    "line": ("relplot", "line"),
    "hist": ("displot", "hist"),
    "kde": ("displot", "kde"),
    "ecdf": ("displot", "ecdf"),
    "box": ("catplot", "box"),
    "violin": ("catplot", "violin"),
    "strip": ("catplot", "strip"),
    "bar": ("catplot", "bar"),
    "point": ("catplot", "point"),
    "count": ("catplot", "count"),
    "smooth": ("lmplot", None),
}

SMOOTH_METHODS = ("lm", "lowess")

# Kinds that derive the y axis themselves
_NO_Y = {"hist", "kde", "ecdf", "count"}
_DEFAULT_YLABEL = {"hist": "Count", "count": "Count", "kde": "Density", "ecdf": "Proportion"}

COLUMN_LABELS: dict[str, str] = {
    "displ": "Engine displacement (L)",
    "cty": "City fuel economy (mpg)",
    "hwy": "Highway fuel economy (mpg)",
    "cyl": "Cylinders",
    "drv": "Drive train",
    "class": "Vehicle class",
    "manufacturer": "Manufacturer",
    "BMI": "Body-mass index (kg/m²)",
    "Age": "Age (years)",
    "proportion": "Proportion",
    "mean": "Mean",
    "median": "Median",
}


@dataclass
class ChartSpec:
    """One chart of the workshop.

    ``dropna`` lists columns whose missing rows are removed before
    plotting; ``transform`` (e.g. a group summary) runs afterwards and
    must return the frame the mappings refer to.  ``options`` is passed
    through to the seaborn function untouched.
    """

    name: str
    kind: str
    x: str | None = None
    y: str | None = None
    hue: str | None = None
    style: str | None = None
    size: str | None = None
    col: str | None = None
    row: str | None = None
    col_wrap: int | None = None
    order: Sequence[str] | None = None
    hue_order: Sequence[str] | None = None
    bins: int | None = None
    method: str = "lm"
    title: str | None = None
    xlabel: str | None = None
    ylabel: str | None = None
    theme: str = config.THEME_STYLE
    context: str = config.THEME_CONTEXT
    palette: str | None = config.PALETTE
    height: float = 4.0
    aspect: float = 1.3
    dropna: Sequence[str] = ()
    transform: Callable[[pd.DataFrame], pd.DataFrame] | None = None
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def mapped_columns(self) -> list[str]:
        mappings = (self.x, self.y, self.hue, self.style, self.size, self.col, self.row)
        return [m for m in mappings if m is not None]


@dataclass
class Section:
    """A titled block of the workshop: prose, links and the charts it shows."""

    slug: str
    title: str
    dataset: str
    narrative: str
    charts: list[ChartSpec] = field(default_factory=list)
    resources: list[tuple[str, str]] = field(default_factory=list)


def validate_spec(spec: ChartSpec) -> None:
    """Reject specs seaborn could not draw."""
    if spec.kind not in KINDS:
        raise ValueError(f"{spec.name}: unknown chart kind '{spec.kind}'. Expected one of {sorted(KINDS)}")
    if spec.x is None:
        raise ValueError(f"{spec.name}: an x mapping is required")
    if spec.y is None and spec.kind not in _NO_Y:
        raise ValueError(f"{spec.name}: kind '{spec.kind}' needs a y mapping")
    if spec.y is not None and spec.kind in ("count", "ecdf"):
        raise ValueError(f"{spec.name}: kind '{spec.kind}' computes y itself")
    if spec.kind == "smooth" and spec.method not in SMOOTH_METHODS:
        raise ValueError(f"{spec.name}: smoothing method must be one of {SMOOTH_METHODS}, got '{spec.method}'")
    if spec.col_wrap is not None and spec.row is not None:
        raise ValueError(f"{spec.name}: col_wrap cannot be combined with a row facet")
    if spec.style is not None or spec.size is not None:
        if KINDS[spec.kind][0] != "relplot":
            raise ValueError(f"{spec.name}: style/size mappings only apply to scatter and line charts")


def prepare_chart_data(df: pd.DataFrame, spec: ChartSpec) -> pd.DataFrame:
    """Drop rows missing ``spec.dropna`` then apply ``spec.transform``."""
    frame = drop_missing(df, spec.dropna) if spec.dropna else df
    if spec.transform is not None:
        frame = spec.transform(frame)
    missing = [c for c in spec.mapped_columns if c not in frame.columns]
    if missing:
        raise ValueError(f"{spec.name}: column(s) {missing} not found in chart data")
    return frame


def _seaborn_kwargs(frame: pd.DataFrame, spec: ChartSpec) -> dict[str, Any]:
    func_name, kind = KINDS[spec.kind]
    kwargs: dict[str, Any] = {"data": frame, "x": spec.x, "height": spec.height, "aspect": spec.aspect}
    if kind is not None:
        kwargs["kind"] = kind
    if spec.y is not None:
        kwargs["y"] = spec.y
    for key in ("hue", "col", "row"):
        value = getattr(spec, key)
        if value is not None:
            kwargs[key] = value
    if spec.col_wrap is not None:
        kwargs["col_wrap"] = spec.col_wrap
    if spec.hue is not None:
        if spec.palette is not None:
            kwargs["palette"] = spec.palette
        if spec.hue_order is not None:
            kwargs["hue_order"] = list(spec.hue_order)

    if func_name == "relplot":
        if spec.style is not None:
            kwargs["style"] = spec.style
        if spec.size is not None:
            kwargs["size"] = spec.size
    elif func_name == "displot":
        if spec.bins is not None and kind == "hist":
            kwargs["bins"] = spec.bins
    elif func_name == "catplot":
        if spec.order is not None:
            kwargs["order"] = list(spec.order)
    elif func_name == "lmplot":
        if spec.method == "lowess":
            kwargs["lowess"] = True

    kwargs.update(spec.options)
    return kwargs


def render_chart(df: pd.DataFrame, spec: ChartSpec) -> sns.FacetGrid:
    """Draw ``spec`` from ``df`` and return the seaborn grid."""
    validate_spec(spec)
    frame = prepare_chart_data(df, spec)
    func_name, _ = KINDS[spec.kind]
    kwargs = _seaborn_kwargs(frame, spec)

    xlabel = spec.xlabel or pretty_label(spec.x, COLUMN_LABELS)
    ylabel = spec.ylabel or pretty_label(spec.y, COLUMN_LABELS) or _DEFAULT_YLABEL.get(spec.kind)

    LOG.debug("Rendering %s with sns.%s (%d rows)", spec.name, func_name, len(frame))
    open_before = set(plt.get_fignums())
    try:
        with sns.axes_style(spec.theme), sns.plotting_context(spec.context):
            grid = getattr(sns, func_name)(**kwargs)
            grid.set_axis_labels(xlabel, ylabel)
            if spec.title:
                grid.figure.suptitle(spec.title, y=1.02)
    except BaseException:
        # seaborn may have created the figure before failing
        for num in set(plt.get_fignums()) - open_before:
            plt.close(num)
        raise
    return grid


def save_chart(grid: sns.FacetGrid, path, dpi: int | None = None) -> Path:
    """Save ``grid`` as an image at ``path`` and release the figure."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        grid.savefig(path, dpi=dpi or config.FIGURE_DPI)
    finally:
        plt.close(grid.figure)
    return path
