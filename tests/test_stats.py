import math

import numpy as np
import pytest

from pocketstats.stats.descriptive import (
    correlation,
    covariance,
    modes,
    paired_summary,
    summarize,
)


def test_summarize_values():
    out = summarize([1.0, 2.0, 2.0, 3.0, 3.0])
    assert out["n"] == 5
    assert np.isclose(out["mean"], 2.2)
    assert np.isclose(out["population_variance"], 0.56)
    assert np.isclose(out["sample_variance"], 0.7)
    assert np.isclose(out["population_sd"], math.sqrt(0.56))
    assert np.isclose(out["sample_sd"], math.sqrt(0.7))
    assert out["median"] == 2.0
    assert out["mode"] == [2.0, 3.0]
    assert out["minimum"] == 1.0
    assert out["maximum"] == 3.0


def test_summarize_even_count_median_and_single_value():
    assert summarize([4.0, 1.0, 3.0, 2.0])["median"] == 2.5

    single = summarize([5.0])
    assert single["sample_variance"] == 0.0
    assert single["population_variance"] == 0.0
    assert single["mode"] == [5.0]


def test_summarize_ignores_non_finite_and_rejects_empty():
    assert summarize([1.0, np.nan, 3.0, np.inf])["n"] == 2
    with pytest.raises(ValueError, match="No valid data"):
        summarize([])
    with pytest.raises(ValueError):
        summarize([np.nan])


def test_modes_all_unique_returns_every_value():
    assert modes([3.2, 4.1, 5.0]) == [3.2, 4.1, 5.0]
    assert modes([]) == []


def test_covariance_and_correlation():
    x = [1.0, 2.0, 3.0, 4.0, 5.0]
    y = [2.0, 4.0, 6.0, 8.0, 10.0]
    assert np.isclose(covariance(x, y), 5.0)
    assert np.isclose(correlation(x, y), 1.0)
    assert np.isclose(correlation(x, [10.0, 8.0, 6.0, 4.0, 2.0]), -1.0)
    assert math.isnan(correlation(x, [3.0] * 5))


def test_paired_summary_line():
    out = paired_summary([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
    assert out["n"] == 5
    assert np.isclose(out["mean_x"], 3.0)
    assert np.isclose(out["mean_y"], 6.0)
    assert np.isclose(out["slope"], 2.0)
    assert np.isclose(out["intercept"], 0.0)
    assert np.isclose(out["correlation"], 1.0)


def test_paired_summary_validation():
    with pytest.raises(ValueError, match="same length"):
        paired_summary([1, 2, 3], [1, 2])
    with pytest.raises(ValueError, match="more than one"):
        paired_summary([1], [2])
