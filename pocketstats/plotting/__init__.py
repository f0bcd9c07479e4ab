"""
Chart utilities for the statistics toolkit forms.

All plotting functions accept precomputed results and do not perform
statistical calculations beyond the mean/median guides of a histogram.

Modules:
    regression_plots:
        Scatter plot of paired data with the least-squares line and an R²
        annotation, as shown by the regression form.

    summary_plots:
        Histogram of a single sample and ANOVA group means with ±1 SD
        error bars over the raw observations.

    style:
        Shared rcParams, axis helpers, and PNG/PDF/SVG save helpers.
"""

from .regression_plots import plot_regression
from .style import set_global_style
from .summary_plots import plot_group_means, plot_histogram

__all__ = ["plot_regression", "plot_histogram", "plot_group_means", "set_global_style"]
