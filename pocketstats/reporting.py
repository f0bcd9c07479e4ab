"""Render form results as the monospaced text blocks shown to the user.

This module is used after the numerical work in :mod:`pocketstats.analysis`;
it never computes statistics itself, it only lays them out.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable

from .analysis import SIGNIFICANCE_LEVEL


def format_p_value(p: float, decimals: int = 5) -> str:
    """Format a p-value, collapsing values below display precision.

    Args:
        p (float): Probability in ``[0, 1]`` (NaN allowed).
        decimals (int, optional): Decimal places. Defaults to ``5``.

    Returns:
        str: For example ``"0.03125"``, ``"< 0.00001"`` or ``"nan"``.
    """
    if p is None or math.isnan(p):
        return "nan"
    floor = 10.0 ** (-decimals)
    if 0 <= p < floor:
        return f"< {floor:.{decimals}f}"
    return f"{p:.{decimals}f}"


def conclusion(
    p: float,
    alpha: float = SIGNIFICANCE_LEVEL,
    reject_text: str = "Reject H₀",
    keep_text: str = "Fail to reject H₀",
) -> str:
    """Return the accept/reject wording for a p-value at level ``alpha``.

    Note:
        A NaN p-value never rejects.
    """
    if p is not None and not math.isnan(p) and p < alpha:
        return reject_text
    return keep_text


def _format_modes(mode: Iterable[float]) -> str:
    mode = list(mode)
    if not mode:
        return "None"
    return ", ".join(f"{m:.4f}" for m in mode)


def format_single_stats(result: Dict) -> str:
    """Lay out the single-variable summary."""
    lines = [
        f"n                   = {result['n']}",
        f"Mean                = {result['mean']:.6f}",
        f"Population Var      = {result['population_variance']:.6f}",
        f"Population SD       = {result['population_sd']:.6f}",
        f"Sample Var          = {result['sample_variance']:.6f}",
        f"Sample SD           = {result['sample_sd']:.6f}",
        f"Median              = {result['median']:.6f}",
        f"Mode                = {_format_modes(result['mode'])}",
    ]
    return "\n".join(lines)


def format_paired_stats(result: Dict) -> str:
    """Lay out paired means, covariance, correlation and the LS line."""
    return "\n".join(
        [
            f"Mean(X)         = {result['mean_x']:.6f}",
            f"Mean(Y)         = {result['mean_y']:.6f}",
            "",
            f"Covariance      = {result['covariance']:.6f}",
            f"Correlation (r) = {result['correlation']:.6f}",
            "",
            "Regression Line:",
            f"Y = {result['intercept']:.6f} + {result['slope']:.6f}·X",
        ]
    )


def format_regression(result: Dict) -> str:
    """Lay out regression coefficients, fit quality and slope inference."""
    lines = [
        f"b0 (intercept) = {result['b']:.5f}",
        f"b1 (slope)     = {result['m']:.5f}",
        f"R²             = {result['r2']:.5f}",
        f"Model: Y = {result['b']:.5f} + {result['m']:.5f}·X",
    ]
    if result.get("dof", 0) > 0:
        lines += [
            "",
            f"SE(b1)         = {result['se_m']:.5f}",
            f"95% CI (b1)    = {result['m']:.5f} ± {result['ci95_m']:.5f}",
            f"p-value (b1=0) = {format_p_value(result['p_m'])}",
        ]
    return "\n".join(lines)


def format_t_test(result: Dict) -> str:
    """Lay out a one-sample t-test result with its conclusion."""
    ci_level = int(round((1.0 - result["alpha"]) * 100))
    return "\n".join(
        [
            f"n           = {result['n']}",
            f"Mean        = {result['mean']:.4f}",
            f"SD          = {result['sd']:.4f}",
            "",
            f"t-stat      = {result['t']:.4f}",
            f"df          = {result['df']}",
            f"p-value     = {format_p_value(result['p_value'])}",
            f"{ci_level}% CI      = ({result['ci_low']:.4f}, {result['ci_high']:.4f})",
            "",
            "Conclusion: "
            + conclusion(
                result["p_value"],
                result["alpha"],
                reject_text="Reject H₀ ✅",
                keep_text="Fail to reject H₀ ❌",
            ),
        ]
    )


def format_anova(result: Dict) -> str:
    """Lay out the one-way ANOVA decomposition and conclusion."""
    return "\n".join(
        [
            f"Groups = {result['k']}",
            f"Total N = {result['n_total']}",
            "",
            f"SS Between = {result['ss_between']}",
            f"SS Within  = {result['ss_within']}",
            "",
            f"MS Between = {result['ms_between']}",
            f"MS Within  = {result['ms_within']}",
            "",
            f"F = {result['f']}",
            f"df = ({result['df_between']}, {result['df_within']})",
            f"p-value = {format_p_value(result['p_value'])}",
            "",
            "Conclusion: "
            + conclusion(
                result["p_value"],
                result["alpha"],
                reject_text="Reject H₀ (groups differ)",
            ),
        ]
    )
