"""
A pocket statistics toolkit.

Computes single-variable and paired summaries, simple linear regression, the
one-sample t-test and one-way ANOVA from delimited text input, using a
self-contained special-function library for the t and F distributions.

Modules:
    - data_processing: Parses delimited text and CSV tables into numbers.
    - analysis: Runs each form and validates its input.
    - reporting: Formats results, p-values and conclusions as text.
    - guides: Statistics cheat sheet and R basics tutorial.
    - output: Saves result tables to CSV.
    - plotting: Regression, histogram and ANOVA charts.
    - stats: Special functions, descriptive statistics, regression.
"""

__version__ = "1.0.0"

from .analysis import (
    SIGNIFICANCE_LEVEL,
    anova_table,
    group_summary_dataframe,
    one_sample_t_test,
    one_way_anova,
    paired_stats,
    simple_regression,
    single_variable_stats,
)
from .data_processing import parse_groups, parse_numbers
from .stats.special import (
    ConvergenceError,
    f_cdf,
    log_beta,
    log_gamma,
    regularized_incomplete_beta,
    student_t_cdf,
)

__all__ = [
    # Parsing
    "parse_numbers",
    "parse_groups",
    # Forms
    "SIGNIFICANCE_LEVEL",
    "single_variable_stats",
    "paired_stats",
    "simple_regression",
    "one_sample_t_test",
    "one_way_anova",
    "anova_table",
    "group_summary_dataframe",
    # Special functions
    "ConvergenceError",
    "log_gamma",
    "log_beta",
    "regularized_incomplete_beta",
    "student_t_cdf",
    "f_cdf",
]
