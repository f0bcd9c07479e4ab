"""
Parses delimited text and CSV tables into numeric arrays.
"""

# Free-text fields accept values separated by commas, spaces, tabs or
# newlines, mixed freely ("4.2, 5.1 6.0\n5.3"). Tokens that are not numbers
# are dropped with a warning so one typo does not discard a whole sample.

import logging
import re

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


def parse_numbers(text):
    """Parse comma/space/tab/newline separated text into floats.

    Args:
        text (str | None): Raw user input.

    Returns:
        numpy.ndarray: Parsed values in input order (may be empty).
    """
    if text is None:
        return np.array([], dtype=float)

    values = []
    for token in _SEPARATORS.split(str(text)):
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError:
            logger.warning("Ignoring non-numeric token %r", token)

    return np.asarray(values, dtype=float)


def parse_groups(texts):
    """Parse one text field per group, as entered in the ANOVA form."""
    return [parse_numbers(text) for text in texts]


def load_table(filepath):
    """
    Load a data table from a CSV file.

    Args:
        filepath (str): Path to the CSV file.

    Returns:
        pd.DataFrame: Loaded DataFrame.
    """
    return pd.read_csv(filepath)


def column_values(df, column):
    """Return the numeric, NaN-free values of one column.

    Non-numeric cells are coerced to NaN and dropped, so columns of unequal
    length padded with blanks load cleanly.

    Raises:
        KeyError: If ``column`` is not present in ``df``.
    """
    if column not in df.columns:
        raise KeyError(
            f"Column '{column}' not found. Available columns: {list(df.columns)}"
        )
    values = pd.to_numeric(df[column], errors="coerce").dropna()
    dropped = int(df[column].notna().sum() - len(values))
    if dropped:
        logger.warning("Dropped %d non-numeric cells from column '%s'", dropped, column)
    return values.to_numpy(dtype=float)


def groups_from_long_table(df, group_col, value_col):
    """Split a long-format table into ANOVA groups.

    Args:
        df: DataFrame with one observation per row.
        group_col: Column holding the group label.
        value_col: Column holding the numeric observation.

    Returns:
        dict[str, numpy.ndarray]: Group label to values, in order of first
        appearance.

    Raises:
        KeyError: If either column is missing.
    """
    for col in (group_col, value_col):
        if col not in df.columns:
            raise KeyError(
                f"Column '{col}' not found. Available columns: {list(df.columns)}"
            )

    working = df[[group_col, value_col]].copy()
    working[value_col] = pd.to_numeric(working[value_col], errors="coerce")
    working = working.dropna(subset=[group_col, value_col])

    groups = {}
    for name, group in working.groupby(group_col, sort=False):
        groups[str(name)] = group[value_col].to_numpy(dtype=float)
    return groups
