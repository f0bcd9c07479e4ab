"""
Statistics toolkit forms.

Each form validates the parsed input the way the interactive toolkit does,
then delegates the arithmetic to :mod:`pocketstats.stats`:

- Single-variable stats: mean, population/sample variance and SD, median, mode.
- Paired stats: means, covariance, Pearson r and the least-squares line.
- Simple regression: intercept, slope, R^2 plus slope inference.
- One-sample t-test: t = (mean - mu0) / (s / sqrt(n)), df = n - 1, p-value
  from the Student-t CDF.
- One-way ANOVA: between/within sums of squares, F = MSB / MSW, p-value from
  the upper tail of the F CDF.

Conclusions compare the p-value with a fixed significance level of 0.05 unless
the caller passes another ``alpha``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Sequence

import numpy as np
import pandas as pd

from .schema import ANOVA_COLUMNS, GROUP_COLUMNS
from .stats.descriptive import paired_summary, summarize
from .stats.regression import linear_regression
from .stats.special import f_cdf, student_t_cdf, student_t_ppf

logger = logging.getLogger(__name__)

SIGNIFICANCE_LEVEL = 0.05
ALTERNATIVES = ("two-sided", "less", "greater")


def _as_array(values) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    return arr[np.isfinite(arr)]


def single_variable_stats(values) -> Dict:
    """Run the single-variable form.

    Raises:
        ValueError: If no valid numbers were entered.
    """
    arr = _as_array(values)
    if len(arr) == 0:
        raise ValueError("Please enter valid data.")
    return summarize(arr)


def paired_stats(x, y) -> Dict:
    """Run the paired-data form.

    Raises:
        ValueError: If X and Y differ in length or hold fewer than two pairs.
    """
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if len(x_arr) != len(y_arr) or len(x_arr) < 2:
        raise ValueError("X and Y must have same length and > 1 values.")
    return paired_summary(x_arr, y_arr)


def simple_regression(x, y) -> Dict:
    """Run the simple linear regression form.

    Returns:
        dict: Output of :func:`pocketstats.stats.regression.linear_regression`
        with ``b0``/``b1`` aliases for intercept/slope and a ``model`` string.

    Raises:
        ValueError: If lengths differ, fewer than two pairs are given, or X
            has zero variance.
    """
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if len(x_arr) != len(y_arr) or len(x_arr) < 2:
        raise ValueError("X and Y must match length & >1")

    fit = linear_regression(x_arr, y_arr, min_points=2)
    fit["b0"] = fit["b"]
    fit["b1"] = fit["m"]
    fit["model"] = f"Y = {fit['b']:.5f} + {fit['m']:.5f}·X"
    logger.info("Regression fitted on %d points: %s", fit["n"], fit["model"])
    return fit


def t_test_p_value(t: float, df: float, alternative: str = "two-sided") -> float:
    """Convert a t statistic into a p-value for the chosen alternative."""
    if alternative not in ALTERNATIVES:
        raise ValueError(
            f"Unknown alternative '{alternative}'. Expected one of {ALTERNATIVES}."
        )
    cdf = student_t_cdf(t, df)
    if alternative == "less":
        return cdf
    if alternative == "greater":
        return 1.0 - cdf
    return 2.0 * min(cdf, 1.0 - cdf)


def one_sample_t_test(
    values,
    mu0: float,
    alternative: str = "two-sided",
    alpha: float = SIGNIFICANCE_LEVEL,
) -> Dict:
    """Test whether a sample mean differs from a hypothesized value.

    Args:
        values (array-like): Sample observations.
        mu0 (float): Hypothesized population mean.
        alternative (str, optional): ``"two-sided"``, ``"less"`` or
            ``"greater"``. Defaults to ``"two-sided"``.
        alpha (float, optional): Significance level for the conclusion and
            the ``1 - alpha`` confidence interval. Defaults to ``0.05``.

    Returns:
        dict: ``n``, ``mean``, ``sd``, ``se``, ``mu0``, ``t``, ``df``,
        ``p_value``, ``alternative``, ``alpha``, ``reject``, ``ci_low`` and
        ``ci_high``.

    Raises:
        ValueError: If fewer than two values are given, ``mu0`` is not
            finite, ``alternative`` is unknown, or all values are identical.

    Note:
        The two-sided p-value is ``2 * min(cdf, 1 - cdf)``, which is
        symmetric in the sign of ``t``.
    """
    arr = _as_array(values)
    if len(arr) < 2 or mu0 is None or not math.isfinite(float(mu0)):
        raise ValueError("Invalid input")
    if alternative not in ALTERNATIVES:
        raise ValueError(
            f"Unknown alternative '{alternative}'. Expected one of {ALTERNATIVES}."
        )
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"alpha must lie strictly between 0 and 1, got {alpha!r}")

    n = int(len(arr))
    mean = float(np.mean(arr))
    sd = float(np.std(arr, ddof=1))
    if sd == 0:
        raise ValueError(
            "All values identical - variance = 0. t-test cannot be computed."
        )

    se = sd / math.sqrt(n)
    t = (mean - float(mu0)) / se
    df = n - 1
    p = t_test_p_value(t, df, alternative)

    t_crit = student_t_ppf(1.0 - alpha / 2.0, df)
    result = {
        "n": n,
        "mean": mean,
        "sd": sd,
        "se": se,
        "mu0": float(mu0),
        "t": t,
        "df": df,
        "p_value": p,
        "alternative": alternative,
        "alpha": alpha,
        "reject": bool(p < alpha),
        "ci_low": mean - t_crit * se,
        "ci_high": mean + t_crit * se,
    }
    logger.info("One-sample t-test: t=%.4f, df=%d, p=%.5f", t, df, p)
    return result


def _named_groups(groups) -> Dict[str, np.ndarray]:
    if isinstance(groups, Mapping):
        items = groups.items()
    else:
        items = ((f"Group {i + 1}", g) for i, g in enumerate(groups))
    return {str(name): _as_array(values) for name, values in items}


def one_way_anova(
    groups: Mapping[str, Sequence[float]] | Sequence[Sequence[float]],
    alpha: float = SIGNIFICANCE_LEVEL,
) -> Dict:
    """Compare group means with a one-way analysis of variance.

    Args:
        groups: Mapping of group name to values, or a sequence of value
            sequences (named ``Group 1``, ``Group 2``, ...).
        alpha (float, optional): Significance level. Defaults to ``0.05``.

    Returns:
        dict: ``k``, ``n_total``, ``grand_mean``, ``ss_between``,
        ``ss_within``, ``df_between``, ``df_within``, ``ms_between``,
        ``ms_within``, ``f``, ``p_value``, ``alpha``, ``reject``, ``groups``
        (name to values) and ``group_summary`` (list of per-group dicts).

    Raises:
        ValueError: If fewer than two groups are given, any group is empty,
            or there are no within-group degrees of freedom.

    Note:
        With zero within-group variance, ``F`` is infinite (p = 0) when the
        group means differ and NaN (no conclusion) when they are all equal.
    """
    named = _named_groups(groups)
    if len(named) < 2:
        raise ValueError("ANOVA needs at least two groups")
    if any(len(v) == 0 for v in named.values()):
        raise ValueError("Every group needs data")

    all_values = np.concatenate(list(named.values()))
    n_total = int(len(all_values))
    k = len(named)
    if n_total <= k:
        raise ValueError("ANOVA needs more observations than groups")

    grand_mean = float(np.mean(all_values))
    ss_between = 0.0
    ss_within = 0.0
    summary = []
    for name, values in named.items():
        m = float(np.mean(values))
        ss_between += len(values) * (m - grand_mean) ** 2
        ss_within += float(np.sum((values - m) ** 2))
        summary.append(
            {
                "name": name,
                "n": int(len(values)),
                "mean": m,
                "sd": float(np.std(values, ddof=1)) if len(values) > 1 else math.nan,
            }
        )

    df_between = k - 1
    df_within = n_total - k
    ms_between = ss_between / df_between
    ms_within = ss_within / df_within

    if ms_within > 0:
        f = ms_between / ms_within
        p = 1.0 - f_cdf(f, df_between, df_within)
    elif ms_between > 0:
        f = math.inf
        p = 0.0
    else:
        f = math.nan
        p = math.nan

    logger.info(
        "One-way ANOVA: k=%d, N=%d, F=%s, p=%s", k, n_total, f, p
    )
    return {
        "k": k,
        "n_total": n_total,
        "grand_mean": grand_mean,
        "ss_between": ss_between,
        "ss_within": ss_within,
        "df_between": df_between,
        "df_within": df_within,
        "ms_between": ms_between,
        "ms_within": ms_within,
        "f": f,
        "p_value": p,
        "alpha": alpha,
        "reject": bool(p < alpha) if not math.isnan(p) else False,
        "groups": named,
        "group_summary": summary,
    }


def anova_table(result: Dict) -> pd.DataFrame:
    """Build the classic Between/Within/Total ANOVA table."""
    cols = ANOVA_COLUMNS
    rows = [
        {
            cols.source: "Between",
            cols.ss: result["ss_between"],
            cols.df: result["df_between"],
            cols.ms: result["ms_between"],
            cols.f: result["f"],
            cols.p_value: result["p_value"],
        },
        {
            cols.source: "Within",
            cols.ss: result["ss_within"],
            cols.df: result["df_within"],
            cols.ms: result["ms_within"],
            cols.f: np.nan,
            cols.p_value: np.nan,
        },
        {
            cols.source: "Total",
            cols.ss: result["ss_between"] + result["ss_within"],
            cols.df: result["n_total"] - 1,
            cols.ms: np.nan,
            cols.f: np.nan,
            cols.p_value: np.nan,
        },
    ]
    return pd.DataFrame(
        rows, columns=[cols.source, cols.ss, cols.df, cols.ms, cols.f, cols.p_value]
    )


def group_summary_dataframe(result: Dict) -> pd.DataFrame:
    """Return the per-group n, mean and SD as a DataFrame."""
    cols = GROUP_COLUMNS
    rows = [
        {cols.group: g["name"], cols.n: g["n"], cols.mean: g["mean"], cols.sd: g["sd"]}
        for g in result["group_summary"]
    ]
    return pd.DataFrame(rows, columns=[cols.group, cols.n, cols.mean, cols.sd])
