"""
Subpackage for collecting the workshop datasets.

The ``datasets`` module knows where each table is mirrored, downloads it
into ``config.RAW_DATA_DIR`` and loads it back with its schema checked.
"""

__all__ = ["datasets"]
