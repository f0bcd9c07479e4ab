"""Write form result tables to reproducible CSV files.

This module is the output boundary between in-memory results and files a
user can open in a spreadsheet.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Dict, List, Mapping

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def _table_filename(name: str) -> str:
    stem = re.sub(r"[^A-Za-z0-9._-]+", "_", str(name).strip()).strip("._")
    return f"{stem or 'table'}.csv"


def save_results_to_csv(
    tables: Mapping[str, pd.DataFrame], output_dir: str = "output"
) -> List[str]:
    """Save named result tables as ``<name>.csv`` files.

    Args:
        tables (Mapping[str, pandas.DataFrame]): Table name to DataFrame, for
            example ``{"anova_table": ..., "group_summary": ...}``.
        output_dir (str): Directory where CSV outputs are written.

    Returns:
        list[str]: Paths of the written files, in ``tables`` order.

    Raises:
        ValueError: If ``tables`` is empty.
    """
    if not tables:
        raise ValueError("No result tables to save.")
    os.makedirs(output_dir, exist_ok=True)

    paths = []
    for name, df in tables.items():
        path = os.path.join(output_dir, _table_filename(name))
        df.to_csv(path, index=False)
        logger.info("Saved %s to %s", name, path)
        paths.append(path)
    return paths


def result_to_frame(result: Dict) -> pd.DataFrame:
    """Flatten a scalar result dict into a two-column Statistic/Value table.

    Non-scalar entries (lists, arrays, nested dicts) are skipped, except
    lists of floats such as the modes, which are joined with ``"; "``.
    """
    rows = []
    for key, value in result.items():
        if isinstance(value, (list, tuple)):
            if all(isinstance(v, (int, float)) for v in value):
                rows.append({"Statistic": key, "Value": "; ".join(str(v) for v in value)})
            continue
        if isinstance(value, (dict, pd.DataFrame, np.ndarray)):
            continue
        rows.append({"Statistic": key, "Value": value})
    return pd.DataFrame(rows, columns=["Statistic", "Value"])
