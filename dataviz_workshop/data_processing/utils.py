"""
General utility functions for data processing.

Helpers shared by the tidying steps and the chart layer: logging how many
rows a step removed and turning raw column names into readable axis
labels.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

LOG = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def log_row_change(step: str, before: int, after: int) -> int:
    """Log the row count before and after ``step``; return rows removed."""
    removed = before - after
    LOG.info("%s: %d -> %d rows (%d removed)", step, before, after, removed)
    return removed


def pretty_label(column: str | None, labels: Mapping[str, str] | None = None) -> str | None:
    """Return a human readable axis label for ``column``.

    Known columns are looked up in ``labels``; anything else is split on
    underscores and camel-case boundaries and capitalised
    (``"n_positive"`` -> ``"N positive"``, ``"SurveyYr"`` -> ``"Survey yr"``).
    Upper-case abbreviations such as ``BMI`` are left alone.
    """
    if column is None:
        return None
    if labels and column in labels:
        return labels[column]
    if column.isupper():
        return column
    words = _CAMEL_BOUNDARY.sub(" ", column).replace("_", " ").split()
    text = " ".join(words).lower()
    return text[:1].upper() + text[1:]
