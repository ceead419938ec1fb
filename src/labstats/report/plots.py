"""Matplotlib rendering of chart series."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from labstats.report.schemas import ChartKind, ChartSeries

logger = logging.getLogger(__name__)


def plot_chart(
    series: ChartSeries,
    save_path: Path,
    title: Optional[str] = None,
    dpi: int = 160,
) -> Path:
    """Draw a bar (mean +/- SE) or scatter chart and save it.

    Args:
        series: Chart series from a report
        save_path: Output file; the suffix selects the format (.png, .pdf, .svg)
        title: Optional figure title
        dpi: Figure resolution

    Returns:
        Path to the saved figure
    """
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 4.5), dpi=dpi)

    if series.kind == ChartKind.BAR:
        names = [p.name or "" for p in series.points]
        heights = [p.y if p.y is not None else 0.0 for p in series.points]
        errors = [p.error if p.error is not None else 0.0 for p in series.points]
        ax.bar(names, heights, yerr=errors, capsize=6, color="#4C72B0", edgecolor="black", linewidth=0.6)
        if series.reference is not None:
            ax.axhline(series.reference, color="black", lw=1, ls="--", label=f"Reference = {series.reference:g}")
            ax.legend(frameon=False)
    else:
        xs = [p.x for p in series.points if p.x is not None and p.y is not None]
        ys = [p.y for p in series.points if p.x is not None and p.y is not None]
        ax.scatter(xs, ys, s=36, color="#4C72B0", edgecolor="black", linewidth=0.5)

    ax.set_xlabel(series.x_label)
    ax.set_ylabel(series.y_label)
    if title:
        ax.set_title(title)
    ax.grid(True, alpha=0.3, ls=":")

    plt.tight_layout()
    plt.savefig(save_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info(f"Saved {series.kind.value} chart to {save_path}")
    return save_path
