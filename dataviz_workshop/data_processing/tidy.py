"""
Tidying steps applied before plotting.

The survey table repeats participants (it was resampled to undo the
survey's oversampling), so any naive per-person summary first has to
keep a single row per ``ID``.  Beyond that the workshop only needs a
handful of relational operations: drop rows with missing values, group
and summarise, and fix the display order of categorical columns.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Sequence

import pandas as pd

from ..data_collection.datasets import get_source
from .utils import log_row_change

LOG = logging.getLogger(__name__)


def _require_columns(df: pd.DataFrame, columns: Iterable[str]) -> list[str]:
    columns = list(columns)
    unknown = [c for c in columns if c not in df.columns]
    if unknown:
        raise ValueError(f"Unknown column(s): {', '.join(map(str, unknown))}")
    return columns


def deduplicate_participants(df: pd.DataFrame, id_column: str = "ID") -> pd.DataFrame:
    """Keep the first row for every participant identifier.

    The result has exactly ``df[id_column].nunique(dropna=False)`` rows and
    preserves input order.
    """
    _require_columns(df, [id_column])
    out = df.drop_duplicates(subset=id_column, keep="first").reset_index(drop=True)
    log_row_change(f"deduplicate on {id_column}", len(df), len(out))
    return out


def drop_missing(df: pd.DataFrame, columns: str | Sequence[str] | None = None) -> pd.DataFrame:
    """Drop rows with a missing value in any of ``columns`` (all when ``None``)."""
    if isinstance(columns, str):
        columns = [columns]
    subset = _require_columns(df, columns) if columns is not None else None
    if subset == []:
        return df
    out = df.dropna(subset=subset)
    label = ", ".join(subset) if subset else "any column"
    log_row_change(f"drop missing {label}", len(df), len(out))
    return out


def describe_missing(df: pd.DataFrame, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Count missing values per column, most incomplete first."""
    subset = _require_columns(df, columns) if columns is not None else list(df.columns)
    n_missing = df[subset].isna().sum()
    report = pd.DataFrame(
        {
            "column": n_missing.index,
            "n_missing": n_missing.to_numpy(),
            "share_missing": (n_missing / len(df)).to_numpy() if len(df) else 0.0,
        }
    )
    return report.sort_values(["n_missing", "column"], ascending=[False, True]).reset_index(drop=True)


def summarise_by_group(
    df: pd.DataFrame,
    by: str | Sequence[str],
    value: str,
    stats: Sequence[str] = ("count", "mean", "median"),
) -> pd.DataFrame:
    """Aggregate ``value`` with ``stats`` for every observed group in ``by``."""
    by = [by] if isinstance(by, str) else list(by)
    _require_columns(df, by + [value])
    return df.groupby(by, observed=True)[value].agg(list(stats)).reset_index()


def proportion_by_group(
    df: pd.DataFrame,
    group_column: str,
    outcome_column: str,
    positive: object = "Yes",
) -> pd.DataFrame:
    """Share of rows per group whose outcome equals ``positive``.

    Rows with a missing outcome are excluded from both numerator and
    denominator.  Returns ``group_column, n, n_positive, proportion``.
    """
    _require_columns(df, [group_column, outcome_column])
    known = df.dropna(subset=[outcome_column])
    flagged = known.assign(_positive=known[outcome_column].eq(positive))
    out = (
        flagged.groupby(group_column, observed=True)
        .agg(n=("_positive", "size"), n_positive=("_positive", "sum"))
        .reset_index()
    )
    out["n_positive"] = out["n_positive"].astype(int)
    out["proportion"] = out["n_positive"] / out["n"]
    return out


def apply_category_orders(df: pd.DataFrame, orders: Mapping[str, Sequence[str]]) -> pd.DataFrame:
    """Convert columns to ordered categoricals with the given level order.

    Columns absent from ``df`` are ignored.  Values outside the declared
    levels become missing; how many is logged as a warning.
    """
    out = df.copy()
    for column, levels in orders.items():
        if column not in out.columns:
            continue
        raw = out[column]
        if isinstance(raw.dtype, pd.CategoricalDtype):
            raw = raw.astype(object)
        elif raw.dtype != object:
            raw = raw.astype("string")
        known = raw.isin(list(levels))
        lost = int((raw.notna() & ~known).sum())
        if lost:
            LOG.warning("%d value(s) in %s are not in %s and were set to missing", lost, column, list(levels))
        out[column] = pd.Categorical(raw.where(known), categories=list(levels), ordered=True)
    return out


def prepare_fuel_economy(df: pd.DataFrame) -> pd.DataFrame:
    """Working copy of the fuel-economy table with ordered class and drive."""
    source = get_source("fuel_economy")
    out = df.copy()
    out["drv"] = out["drv"].astype(str)
    return apply_category_orders(out, source.category_orders)


def prepare_health_survey(df: pd.DataFrame) -> pd.DataFrame:
    """One row per participant, education levels in increasing order."""
    source = get_source("health_survey")
    out = deduplicate_participants(df, id_column=source.id_column)
    return apply_category_orders(out, source.category_orders)
