"""Centralized plotting style, axis helpers, and save helpers."""

from __future__ import annotations

import re
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    ANNOTATION_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    ALPHA_POINTS: float = 0.65
    GRID_ALPHA: float = 0.20
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)
    FIGSIZE_WIDE: tuple[float, float] = (9.5, 4.2)


STYLE = StyleConfig()

FONT_SIZES = {
    "base": STYLE.BASE_FONTSIZE,
    "title": STYLE.TITLE_FONTSIZE,
    "axis_label": STYLE.LABEL_FONTSIZE,
    "tick": STYLE.TICK_FONTSIZE,
    "legend": STYLE.LEGEND_FONTSIZE,
    "annotation": STYLE.ANNOTATION_FONTSIZE,
}

COLORS = {
    "points": "#1f77b4",
    "fit": "#3f2d8f",
    "bars": "#9ecae1",
    "mean": "#a50f15",
    "median": "#2ca02c",
    "guide": "0.35",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style, scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "figure.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "errorbar.capsize": 3.0,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def clean_axis(ax: Axes, *, grid_axis: str = "y", nbins: int = 6) -> None:
    """Apply consistent ticks, grid, and spine formatting to one axis."""
    ax.tick_params(axis="both", which="major", labelsize=FONT_SIZES["tick"], width=1.0)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=3))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=3))
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(False)
    if grid_axis in {"x", "y", "both"}:
        ax.grid(
            True, axis=grid_axis, alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7
        )


def set_axis_labels(ax: Axes, x: str | None = None, y: str | None = None) -> None:
    """Apply axis labels with project typography."""
    if x is not None:
        ax.set_xlabel(x, fontsize=FONT_SIZES["axis_label"], labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=FONT_SIZES["axis_label"], labelpad=6)


def add_info_box(ax: Axes, text: str, loc: str = "upper right") -> None:
    """Add a small boxed annotation anchored to one corner of the axes."""
    anchor_map = {
        "upper left": (0.03, 0.95, "left", "top"),
        "upper right": (0.97, 0.95, "right", "top"),
        "lower left": (0.03, 0.05, "left", "bottom"),
        "lower right": (0.97, 0.05, "right", "bottom"),
    }
    x, y, ha, va = anchor_map.get(loc, anchor_map["upper right"])
    ax.text(
        x,
        y,
        text,
        transform=ax.transAxes,
        ha=ha,
        va=va,
        fontsize=FONT_SIZES["annotation"],
        bbox={"boxstyle": "round,pad=0.3", "facecolor": "white", "edgecolor": "0.8"},
    )


def sanitize_filename(name: str) -> str:
    """Normalize a filename component into a stable, filesystem-safe token."""
    text = re.sub(r"\s+", "_", str(name).strip())
    text = re.sub(r"[^A-Za-z0-9._-]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("._")
    return text or "figure"


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        if ext not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported extension '{ext}'. Expected one of {OUTPUT_FORMATS}."
            )
        fig.savefig(
            str(base.with_suffix(f".{ext}")),
            dpi=dpi if ext == "png" else None,
            bbox_inches="tight",
            pad_inches=0.12,
        )
    return base.with_suffix(".png")


def finalize_figure(
    fig: Figure,
    output_dir: str | Path,
    name: str,
    *,
    title: str | None = None,
    formats: Sequence[str] = OUTPUT_FORMATS,
) -> str:
    """Apply title and layout, save the bundle, close the figure."""
    if title:
        fig.suptitle(title, fontsize=FONT_SIZES["title"])
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        fig.tight_layout(pad=1.2)
    png_path = save_figure(
        fig, Path(output_dir) / sanitize_filename(name), formats=formats
    )
    plt.close(fig)
    return str(png_path)
