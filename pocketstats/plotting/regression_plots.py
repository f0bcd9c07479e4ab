"""Scatter plot with the fitted regression line for the regression form."""

from __future__ import annotations

import os
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np

from .style import (
    COLORS,
    STYLE,
    add_info_box,
    clean_axis,
    finalize_figure,
    set_axis_labels,
    set_global_style,
)


def plot_regression(
    x,
    y,
    fit: Dict,
    output_dir: str = "output",
    name: str = "regression",
) -> str:
    """Render raw points, the least-squares line, and an R^2 box.

    Args:
        x (array-like): Independent variable values.
        y (array-like): Dependent variable values.
        fit (dict): Output of :func:`pocketstats.analysis.simple_regression`
            (or ``linear_regression``); needs ``m``, ``b`` and ``r2``.
        output_dir (str, optional): Directory for the PNG/PDF/SVG bundle.
        name (str, optional): File stem. Defaults to ``"regression"``.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        KeyError: If ``fit`` lacks a required field.
    """
    required_fields = {"m", "b", "r2"}
    missing = required_fields - set(fit.keys())
    if missing:
        raise KeyError(f"fit dict missing required fields: {missing}")

    set_global_style()
    os.makedirs(output_dir, exist_ok=True)

    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(
        x_arr,
        y_arr,
        s=60,
        color=COLORS["points"],
        alpha=STYLE.ALPHA_POINTS,
        label="Data",
        zorder=3,
    )

    x_line = np.array([x_arr.min(), x_arr.max()])
    ax.plot(
        x_line,
        fit["b"] + fit["m"] * x_line,
        color=COLORS["fit"],
        linewidth=3.0,
        label="Least-squares line",
    )

    add_info_box(ax, f"R² = {fit['r2']:.3f}", loc="upper right")
    set_axis_labels(ax, "X", "Y")
    clean_axis(ax, grid_axis="both")
    ax.legend(loc="upper left")

    return finalize_figure(
        fig, output_dir, name, title="Scatter Plot + Regression Line"
    )
