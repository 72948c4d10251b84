"""
Data Visualisation Workshop Package

This package holds the material of a hands-on data visualisation
workshop: it fetches a vehicle fuel-economy table and a public-health
survey, tidies them (one row per survey participant, missing values
dropped where a chart needs it) and renders a sequence of teaching
sections built from declarative chart specifications.  Modules are
organised by stage and can be used independently from a notebook or
orchestrated together through the high‑level pipeline functions.
"""

from . import config  # noqa: F401
from . import pipelines  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "config",
    "pipelines",
]
