"""
Subpackage for cleaning and reshaping the workshop datasets.

``tidy`` holds the relational steps (deduplication, missing-value
filtering, grouping and summarising, category ordering) and ``utils``
the small helpers they share with the chart layer.
"""

__all__ = [
    "tidy",
    "utils",
]
