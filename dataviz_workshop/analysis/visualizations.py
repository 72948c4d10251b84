"""Render the workshop: every section's charts plus a Markdown index."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from ..utils.file_io import write_text
from . import fuel_economy, health_survey
from .charts import Section, render_chart, save_chart


def workshop_sections() -> list[Section]:
    """All sections in the order they are taught."""
    return fuel_economy.sections() + health_survey.sections()


def select_sections(slugs: Iterable[str] | None = None) -> list[Section]:
    """Return the sections whose slug is in ``slugs`` (all when ``None``)."""
    sections = workshop_sections()
    if slugs is None:
        return sections
    wanted = list(slugs)
    known = {s.slug for s in sections}
    unknown = [s for s in wanted if s not in known]
    if unknown:
        raise ValueError(f"Unknown section(s): {', '.join(unknown)}. Known sections: {', '.join(sorted(known))}")
    return [s for s in sections if s.slug in wanted]


def generate_plots(
    datasets: Mapping[str, pd.DataFrame],
    output_dir,
    sections: Iterable[Section] | None = None,
) -> dict[str, list[Path]]:
    """Render each section's charts to ``<output_dir>/<slug>/<chart>.png``.

    Parameters
    ----------
    datasets : Mapping[str, DataFrame]
        Working tables keyed by dataset name.
    output_dir : Path or str
        Directory where figures should be saved.
    sections : iterable of Section, optional
        Defaults to the whole workshop.

    Notes
    -----
    - A section whose dataset is missing is skipped with a warning.
    - A chart that fails to render is logged and skipped; the remaining
      charts are still produced.
    """
    output_dir = Path(output_dir)
    sections = list(sections) if sections is not None else workshop_sections()
    rendered: dict[str, list[Path]] = {}
    for section in sections:
        df = datasets.get(section.dataset)
        if df is None:
            logging.warning("Dataset %s not loaded; skipping section %s", section.dataset, section.slug)
            continue
        paths = []
        for spec in section.charts:
            path = output_dir / section.slug / f"{spec.name}.png"
            try:
                grid = render_chart(df, spec)
                paths.append(save_chart(grid, path))
            except Exception:
                logging.exception("Failed to render chart %s in section %s", spec.name, section.slug)
                continue
            logging.info("Saved %s", path)
        rendered[section.slug] = paths
    return rendered


def write_index(sections: Iterable[Section], rendered: Mapping[str, list[Path]], output_dir) -> Path:
    """Write ``index.md`` walking through the sections with their figures."""
    output_dir = Path(output_dir)
    lines = ["# Data visualisation workshop", ""]
    for section in sections:
        if section.slug not in rendered:
            continue
        lines += [f"## {section.title}", "", section.narrative, ""]
        for label, url in section.resources:
            lines.append(f"- [{label}]({url})")
        if section.resources:
            lines.append("")
        for path in rendered[section.slug]:
            rel = Path(path).relative_to(output_dir).as_posix()
            lines += [f"![{Path(path).stem}]({rel})", ""]
    return write_text("\n".join(lines), output_dir / "index.md")
