"""Render single-sample and group-comparison summary charts."""

from __future__ import annotations

import math
import os
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np

from .style import (
    COLORS,
    STYLE,
    clean_axis,
    finalize_figure,
    set_axis_labels,
    set_global_style,
)


def plot_histogram(
    values,
    output_dir: str = "output",
    name: str = "histogram",
    bins: int | str = "auto",
) -> str:
    """Render the distribution of one sample with mean and median guides.

    Args:
        values (array-like): Sample values; non-finite entries are ignored.
        output_dir (str, optional): Directory for the PNG/PDF/SVG bundle.
        name (str, optional): File stem. Defaults to ``"histogram"``.
        bins (int | str, optional): Passed to ``Axes.hist``.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If no finite values are supplied.
    """
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    if len(arr) == 0:
        raise ValueError("No valid data to plot.")

    set_global_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.hist(arr, bins=bins, color=COLORS["bars"], edgecolor="white")
    ax.axvline(
        float(np.mean(arr)),
        color=COLORS["mean"],
        linestyle="--",
        linewidth=STYLE.LINEWIDTH_THIN,
        label="Mean",
    )
    ax.axvline(
        float(np.median(arr)),
        color=COLORS["median"],
        linestyle=":",
        linewidth=STYLE.LINEWIDTH_THIN,
        label="Median",
    )

    set_axis_labels(ax, "Value", "Count")
    clean_axis(ax, grid_axis="y")
    ax.legend(loc="upper right")

    return finalize_figure(fig, output_dir, name, title=f"Distribution (n = {len(arr)})")


def plot_group_means(
    result: Dict,
    output_dir: str = "output",
    name: str = "anova_group_means",
) -> str:
    """Render ANOVA group means with ±1 SD error bars and raw observations.

    Args:
        result (dict): Output of :func:`pocketstats.analysis.one_way_anova`.
        output_dir (str, optional): Directory for the PNG/PDF/SVG bundle.
        name (str, optional): File stem. Defaults to ``"anova_group_means"``.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        KeyError: If ``result`` is missing ``groups`` or ``group_summary``.
    """
    required_fields = {"groups", "group_summary", "f", "p_value"}
    missing = required_fields - set(result.keys())
    if missing:
        raise KeyError(f"ANOVA result missing required fields: {missing}")

    set_global_style()
    os.makedirs(output_dir, exist_ok=True)

    summary = result["group_summary"]
    positions = np.arange(len(summary))
    means = [g["mean"] for g in summary]
    sds = [0.0 if math.isnan(g["sd"]) else g["sd"] for g in summary]

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_WIDE)
    for pos, g in zip(positions, summary):
        values = np.asarray(result["groups"][g["name"]], dtype=float)
        jitter = np.linspace(-0.12, 0.12, len(values)) if len(values) > 1 else [0.0]
        ax.scatter(
            pos + np.asarray(jitter),
            values,
            s=26,
            color=COLORS["points"],
            alpha=STYLE.ALPHA_POINTS,
            zorder=2,
        )
    ax.errorbar(
        positions,
        means,
        yerr=sds,
        fmt="s",
        color=COLORS["mean"],
        markersize=8,
        linewidth=STYLE.LINEWIDTH_THIN,
        label="Mean ± 1 SD",
        zorder=3,
    )

    set_axis_labels(ax, None, "Value")
    clean_axis(ax, grid_axis="y")
    ax.set_xticks(positions, labels=[g["name"] for g in summary])
    ax.set_xlim(-0.6, len(summary) - 0.4)
    ax.legend(loc="best")

    title = f"One-Way ANOVA: F = {result['f']:.3f}, p = {result['p_value']:.4f}"
    return finalize_figure(fig, output_dir, name, title=title)
