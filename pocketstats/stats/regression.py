"""Provide the simple linear regression used by the regression form.

Slope inference uses the Student-t routines in :mod:`.special`, so no
external distribution library is needed.
"""

from __future__ import annotations

import math
from typing import Dict

import numpy as np

from .special import student_t_cdf, student_t_ppf


def linear_regression(
    x: np.ndarray, y: np.ndarray, min_points: int = 2
) -> Dict[str, float]:
    """Fit an ordinary least-squares straight line to finite data pairs.

    Args:
        x (numpy.ndarray): Independent variable array.
        y (numpy.ndarray): Dependent variable array, same length as ``x``.
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``2``.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2`` (coefficient of determination), ``se_m``,
        ``se_b``, ``ci95_m``, ``ci95_b`` (95% half-widths), and ``p_m``
        (two-sided p-value for a zero slope), plus ``n``, ``dof``, ``mse``,
        ``ssxx`` and ``xbar``.

    Raises:
        ValueError: If lengths differ, there are insufficient valid points,
            or ``x`` has zero variance.

    Note:
        With exactly two points the line is exact and ``dof`` is zero, so the
        standard errors, p-value and intervals are NaN. ``r2`` is NaN when
        ``y`` is constant.

    References:
        Ordinary least squares linear regression.
    """
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if len(x_arr) != len(y_arr):
        raise ValueError("X and Y must match length.")
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")

    xbar = float(np.mean(x_arr))
    ybar = float(np.mean(y_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    if ssxx <= 0:
        raise ValueError("X variance = 0, regression impossible.")
    ssxy = float(np.sum((x_arr - xbar) * (y_arr - ybar)))

    m = ssxy / ssxx
    b = ybar - m * xbar
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - ybar) ** 2))
    r2 = 1.0 - sse / sst if sst > 0 else math.nan

    dof = n - 2
    mse = sse / dof if dof > 0 else math.inf

    se_m = math.nan
    se_b = math.nan
    ci95_m = math.nan
    ci95_b = math.nan
    p_m = math.nan

    if dof > 0:
        se_m = math.sqrt(mse / ssxx)
        se_b = math.sqrt(mse * (1.0 / n + (xbar**2) / ssxx))
        if se_m > 0:
            cdf = student_t_cdf(abs(m / se_m), dof)
            p_m = 2.0 * (1.0 - cdf)
        else:
            p_m = 0.0
        t_crit = student_t_ppf(0.975, dof)
        ci95_m = t_crit * se_m
        ci95_b = t_crit * se_b

    return {
        "m": float(m),
        "b": float(b),
        "r2": float(r2),
        "se_m": se_m,
        "se_b": se_b,
        "ci95_m": ci95_m,
        "ci95_b": ci95_b,
        "p_m": p_m,
        "n": n,
        "dof": dof,
        "mse": mse,
        "ssxx": ssxx,
        "xbar": xbar,
    }
