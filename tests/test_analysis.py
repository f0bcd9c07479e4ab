import math

import numpy as np
import pytest

from pocketstats.analysis import (
    anova_table,
    group_summary_dataframe,
    one_sample_t_test,
    one_way_anova,
    paired_stats,
    simple_regression,
    single_variable_stats,
    t_test_p_value,
)
from pocketstats.schema import ANOVA_COLUMNS


def t3_two_sided_p(t):
    theta = math.atan(abs(t) / math.sqrt(3.0))
    return 1.0 - 2.0 * (theta + math.sin(theta) * math.cos(theta)) / math.pi


def test_one_sample_t_test_end_to_end():
    data = [4.2, 5.1, 6.0, 5.3]
    out = one_sample_t_test(data, 5.0)

    mean = sum(data) / 4
    sd = math.sqrt(sum((v - mean) ** 2 for v in data) / 3)
    t = (mean - 5.0) / (sd / 2.0)

    assert out["n"] == 4
    assert out["df"] == 3
    assert out["t"] == pytest.approx(t)
    assert round(out["p_value"], 4) == round(t3_two_sided_p(t), 4)
    assert out["p_value"] == pytest.approx(t3_two_sided_p(t), abs=1e-9)
    assert out["reject"] is False
    assert out["ci_low"] < mean < out["ci_high"]


def test_one_sample_t_test_matches_scipy():
    stats = pytest.importorskip("scipy.stats")
    data = [4.2, 5.1, 6.0, 5.3]
    ref = stats.ttest_1samp(data, 5.0)
    out = one_sample_t_test(data, 5.0)
    assert out["t"] == pytest.approx(ref.statistic)
    assert out["p_value"] == pytest.approx(ref.pvalue, abs=1e-8)


def test_one_sample_t_test_rejects_far_mean():
    out = one_sample_t_test([10.1, 9.9, 10.3, 10.0, 9.8, 10.2], 5.0)
    assert out["reject"] is True
    assert out["p_value"] < 1e-6


def test_one_sided_alternatives():
    data = [5.5, 6.1, 5.8, 6.4, 5.9]
    greater = one_sample_t_test(data, 5.0, alternative="greater")
    less = one_sample_t_test(data, 5.0, alternative="less")
    two = one_sample_t_test(data, 5.0)
    assert greater["p_value"] + less["p_value"] == pytest.approx(1.0)
    assert two["p_value"] == pytest.approx(2.0 * greater["p_value"])


def test_t_test_p_value_symmetric_in_sign():
    assert t_test_p_value(1.7, 8) == pytest.approx(t_test_p_value(-1.7, 8), abs=1e-15)
    with pytest.raises(ValueError, match="Unknown alternative"):
        t_test_p_value(1.0, 5, "both")


def test_one_sample_t_test_invalid_input():
    with pytest.raises(ValueError, match="Invalid input"):
        one_sample_t_test([4.2], 5.0)
    with pytest.raises(ValueError, match="Invalid input"):
        one_sample_t_test([4.2, 5.0], float("nan"))
    with pytest.raises(ValueError, match="variance = 0"):
        one_sample_t_test([3.0, 3.0, 3.0], 5.0)
    with pytest.raises(ValueError, match="Unknown alternative"):
        one_sample_t_test([1.0, 2.0], 0.0, alternative="up")


def test_one_way_anova_known_values():
    out = one_way_anova([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert out["k"] == 3
    assert out["n_total"] == 9
    assert np.isclose(out["ss_between"], 54.0)
    assert np.isclose(out["ss_within"], 6.0)
    assert (out["df_between"], out["df_within"]) == (2, 6)
    assert np.isclose(out["f"], 27.0)
    # df1 = 2: upper tail is (1 + 2F/df2) ** (-df2/2) = 10 ** -3.
    assert out["p_value"] == pytest.approx(0.001, abs=1e-9)
    assert out["reject"] is True
    assert [g["name"] for g in out["group_summary"]] == ["Group 1", "Group 2", "Group 3"]


def test_one_way_anova_matches_scipy():
    stats = pytest.importorskip("scipy.stats")
    groups = {"a": [4.1, 5.2, 6.3, 5.0], "b": [5.5, 6.0, 7.1], "c": [3.9, 4.4, 5.1, 4.8, 5.3]}
    ref = stats.f_oneway(*groups.values())
    out = one_way_anova(groups)
    assert out["f"] == pytest.approx(ref.statistic)
    assert out["p_value"] == pytest.approx(ref.pvalue, abs=1e-8)


def test_one_way_anova_zero_within_variance():
    out = one_way_anova({"a": [1.0, 1.0], "b": [2.0, 2.0]})
    assert math.isinf(out["f"])
    assert out["p_value"] == 0.0
    assert out["reject"] is True

    flat = one_way_anova({"a": [1.0, 1.0], "b": [1.0, 1.0]})
    assert math.isnan(flat["p_value"])
    assert flat["reject"] is False


def test_one_way_anova_invalid_input():
    with pytest.raises(ValueError, match="Every group needs data"):
        one_way_anova([[1.0, 2.0], []])
    with pytest.raises(ValueError, match="at least two groups"):
        one_way_anova([[1.0, 2.0]])
    with pytest.raises(ValueError, match="more observations"):
        one_way_anova([[1.0], [2.0]])


def test_anova_tables():
    out = one_way_anova({"low": [1, 2, 3], "high": [4, 5, 6]})
    table = anova_table(out)
    assert list(table[ANOVA_COLUMNS.source]) == ["Between", "Within", "Total"]
    assert table.loc[2, ANOVA_COLUMNS.df] == 5
    assert np.isclose(
        table.loc[2, ANOVA_COLUMNS.ss],
        table.loc[0, ANOVA_COLUMNS.ss] + table.loc[1, ANOVA_COLUMNS.ss],
    )

    groups = group_summary_dataframe(out)
    assert list(groups["Group"]) == ["low", "high"]
    assert np.allclose(groups["Mean"], [2.0, 5.0])


def test_simple_regression_form():
    fit = simple_regression([1, 2, 3, 4, 5], [2, 3, 6, 8, 10])
    assert np.isclose(fit["b1"], 2.1)
    assert np.isclose(fit["b0"], -0.5)
    assert fit["model"].startswith("Y = -0.50000 + 2.10000")
    with pytest.raises(ValueError, match="match length"):
        simple_regression([1, 2, 3], [1, 2])
    with pytest.raises(ValueError, match="X variance = 0"):
        simple_regression([1, 1, 1], [1, 2, 3])


def test_single_and_paired_forms_validate_input():
    with pytest.raises(ValueError, match="Please enter valid data"):
        single_variable_stats([])
    assert single_variable_stats([1.0, 2.0])["n"] == 2

    with pytest.raises(ValueError, match="same length"):
        paired_stats([1, 2], [1, 2, 3])
    with pytest.raises(ValueError, match="> 1 values"):
        paired_stats([1], [1])
    assert np.isclose(paired_stats([1, 2, 3], [2, 4, 6])["slope"], 2.0)


def test_p_value_for_small_t_with_many_observations():
    # n = 101, t = 0.05: the t distribution is close to the normal here.
    expected = 2.0 * (1.0 - 0.5 * (1.0 + math.erf(0.05 / math.sqrt(2.0))))
    p = t_test_p_value(0.05, 100)
    assert p == pytest.approx(expected, abs=2e-3)
    assert p > 0.95
