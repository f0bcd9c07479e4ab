import os

import numpy as np
import pandas as pd
import pytest

from pocketstats.analysis import anova_table, one_way_anova
from pocketstats.output import result_to_frame, save_results_to_csv


def test_save_results_to_csv_writes_each_table(tmp_path):
    result = one_way_anova({"a": [1, 2, 3], "b": [3, 4, 5]})
    paths = save_results_to_csv(
        {"anova table": anova_table(result), "summary": result_to_frame(result)},
        output_dir=str(tmp_path),
    )
    assert [os.path.basename(p) for p in paths] == ["anova_table.csv", "summary.csv"]
    reloaded = pd.read_csv(paths[0])
    assert list(reloaded["Source"]) == ["Between", "Within", "Total"]


def test_save_results_to_csv_requires_tables(tmp_path):
    with pytest.raises(ValueError, match="No result tables"):
        save_results_to_csv({}, output_dir=str(tmp_path))


def test_result_to_frame_flattens_scalars():
    frame = result_to_frame(
        {"n": 3, "mean": 2.0, "mode": [1.0, 2.0], "groups": {"a": [1]}, "raw": np.ones(3)}
    )
    assert list(frame["Statistic"]) == ["n", "mean", "mode"]
    assert frame.loc[2, "Value"] == "1.0; 2.0"
