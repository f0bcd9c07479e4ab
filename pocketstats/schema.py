"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnovaColumns:
    """Container for one-way ANOVA table labels.

    These column names are used by the ANOVA table, its CSV export and the
    group-means chart, so all three stay consistent.

    Attributes:
        source: Row label column (``Between``, ``Within``, ``Total``).
        ss: Sum of squares for the source of variation.
        df: Degrees of freedom. Between uses ``k - 1``, Within ``N - k``.
        ms: Mean square, ``SS / df``. Not defined for the Total row.
        f: F statistic, ``MS Between / MS Within``. Between row only.
        p_value: Upper-tail F probability, ``1 - F_CDF(F; df1, df2)``.
    """

    source: str = "Source"
    ss: str = "SS"
    df: str = "df"
    ms: str = "MS"
    f: str = "F"
    p_value: str = "p-value"


@dataclass(frozen=True)
class GroupColumns:
    """Container for per-group summary labels used in ANOVA output."""

    group: str = "Group"
    n: str = "n"
    mean: str = "Mean"
    sd: str = "SD"


ANOVA_COLUMNS = AnovaColumns()
GROUP_COLUMNS = GroupColumns()
