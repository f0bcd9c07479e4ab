"""
Numerical utilities behind every pocketstats form.

This subpackage provides the special-function library used for hypothesis
testing, descriptive statistics, and simple linear regression. All functions
operate on arrays and primitive types; no parsing or text formatting is
included.

Modules:
    special:
        Log-gamma (Lanczos), log-beta, regularized incomplete beta
        (continued fraction), and the Student-t and F cumulative
        distribution functions derived from it. Also a Student-t quantile
        used for confidence intervals.

    descriptive:
        Mean, variances, standard deviations, median, mode, covariance and
        correlation for single and paired samples.

    regression:
        Simple linear regression with standard errors, slope p-value and
        95% confidence half-widths.

Design Principle:
    This subpackage has no dependencies on plotting/ or reporting modules.
    It provides pure numerical utilities that can be independently tested.
"""

from .descriptive import correlation, covariance, modes, paired_summary, summarize
from .regression import linear_regression
from .special import (
    ConvergenceError,
    f_cdf,
    log_beta,
    log_gamma,
    regularized_incomplete_beta,
    student_t_cdf,
    student_t_ppf,
)

__all__ = [
    "ConvergenceError",
    "f_cdf",
    "log_beta",
    "log_gamma",
    "regularized_incomplete_beta",
    "student_t_cdf",
    "student_t_ppf",
    "correlation",
    "covariance",
    "modes",
    "paired_summary",
    "summarize",
    "linear_regression",
]
