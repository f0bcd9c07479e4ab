"""Descriptive statistics for one sample and for paired samples."""

from __future__ import annotations

import math
from typing import Dict, List

import numpy as np


def _finite(values) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    return arr[np.isfinite(arr)]


def _paired_finite(x, y) -> tuple[np.ndarray, np.ndarray]:
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if len(x_arr) != len(y_arr):
        raise ValueError(
            f"X and Y must have the same length (got {len(x_arr)} and {len(y_arr)})."
        )
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    if len(x_arr) < 2:
        raise ValueError("X and Y must have more than one valid pair.")
    return x_arr, y_arr


def modes(values) -> List[float]:
    """Return every value that attains the highest frequency, sorted."""
    arr = _finite(values)
    if len(arr) == 0:
        return []
    uniq, counts = np.unique(arr, return_counts=True)
    return [float(v) for v in uniq[counts == counts.max()]]


def summarize(values) -> Dict[str, object]:
    """Compute single-variable summary statistics.

    Args:
        values (array-like): Sample values. Non-finite entries are ignored.

    Returns:
        dict[str, object]: ``n``, ``mean``, ``population_variance``,
        ``population_sd``, ``sample_variance``, ``sample_sd``, ``median``,
        ``mode`` (list of floats), ``minimum`` and ``maximum``.

    Raises:
        ValueError: If no finite values are supplied.

    Note:
        For a single value the sample variance is reported as ``0.0`` rather
        than undefined.
    """
    arr = _finite(values)
    n = int(len(arr))
    if n == 0:
        raise ValueError("No valid data to summarize.")

    pop_var = float(np.var(arr, ddof=0))
    sample_var = float(np.var(arr, ddof=1)) if n > 1 else 0.0

    return {
        "n": n,
        "mean": float(np.mean(arr)),
        "population_variance": pop_var,
        "population_sd": math.sqrt(pop_var),
        "sample_variance": sample_var,
        "sample_sd": math.sqrt(sample_var),
        "median": float(np.median(arr)),
        "mode": modes(arr),
        "minimum": float(np.min(arr)),
        "maximum": float(np.max(arr)),
    }


def covariance(x, y) -> float:
    """Return the sample covariance (divisor ``n - 1``) of paired data."""
    x_arr, y_arr = _paired_finite(x, y)
    return float(np.cov(x_arr, y_arr, ddof=1)[0, 1])


def correlation(x, y) -> float:
    """Return Pearson's r, or NaN when either variable has zero spread."""
    x_arr, y_arr = _paired_finite(x, y)
    sd_x = float(np.std(x_arr, ddof=1))
    sd_y = float(np.std(y_arr, ddof=1))
    if sd_x == 0 or sd_y == 0:
        return math.nan
    return covariance(x_arr, y_arr) / (sd_x * sd_y)


def paired_summary(x, y) -> Dict[str, float]:
    """Summarize paired data: means, spreads, covariance, r and the LS line.

    Args:
        x (array-like): First variable.
        y (array-like): Second variable, same length as ``x``.

    Returns:
        dict[str, float]: ``n``, ``mean_x``, ``mean_y``, ``sd_x``, ``sd_y``,
        ``covariance``, ``correlation``, ``slope`` and ``intercept``. Slope
        and intercept are NaN when ``x`` has zero variance.

    Raises:
        ValueError: If lengths differ or fewer than two valid pairs remain.
    """
    x_arr, y_arr = _paired_finite(x, y)
    mean_x = float(np.mean(x_arr))
    mean_y = float(np.mean(y_arr))
    sd_x = float(np.std(x_arr, ddof=1))
    sd_y = float(np.std(y_arr, ddof=1))
    cov = covariance(x_arr, y_arr)

    if sd_x > 0:
        slope = cov / float(np.var(x_arr, ddof=1))
        intercept = mean_y - slope * mean_x
    else:
        slope = math.nan
        intercept = math.nan

    return {
        "n": int(len(x_arr)),
        "mean_x": mean_x,
        "mean_y": mean_y,
        "sd_x": sd_x,
        "sd_y": sd_y,
        "covariance": cov,
        "correlation": cov / (sd_x * sd_y) if sd_x > 0 and sd_y > 0 else math.nan,
        "slope": slope,
        "intercept": intercept,
    }
