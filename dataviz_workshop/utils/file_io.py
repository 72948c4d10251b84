"""File input/output helper functions.

Every helper logs the offending path before re-raising, so a failed
workshop run points straight at the file that broke it.  Writers create
missing parent directories and return the path they wrote.
"""

import json
import logging
from contextlib import contextmanager
from pathlib import Path

import pandas as pd


@contextmanager
def _logged_io(action, path):
    """Log ``Failed to <action> file <path>`` for any error raised inside."""
    try:
        yield
    except Exception as exc:
        logging.error("Failed to %s file %s: %s", action, path, exc)
        raise


def _target(path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def read_csv(path, **kwargs):
    """Load a workshop table.  Extra keywords go to ``pd.read_csv``."""
    with _logged_io("read CSV", path):
        return pd.read_csv(Path(path), **kwargs)


def write_csv(df, path):
    """Store ``df`` without its index."""
    with _logged_io("write CSV", path):
        path = _target(path)
        df.to_csv(path, index=False)
    return path


def write_json(data, path):
    with _logged_io("write JSON", path):
        path = _target(path)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def write_text(text, path):
    """Write a model summary or Markdown index to ``path``."""
    with _logged_io("write text", path):
        path = _target(path)
        path.write_text(text, encoding="utf-8")
    return path
