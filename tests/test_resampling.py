import numpy as np
import pytest

from bootstrap_explorer.errors import EmptySample, InvalidParameter
from bootstrap_explorer.resampling import (
    StatisticKind,
    bootstrap_step,
    compute_statistic,
    resample_once,
)


@pytest.fixture
def rng():
    return np.random.default_rng(123)


def test_resample_has_same_length_and_values(rng):
    sample = (1.5, -2.0, 3.25, 7.0, 0.0)
    for _ in range(50):
        resample = resample_once(sample, rng)
        assert len(resample) == len(sample)
        assert set(resample) <= set(sample)


def test_resample_of_single_value(rng):
    assert resample_once([9.0], rng) == (9.0,)


def test_resample_empty_sample_fails(rng):
    with pytest.raises(EmptySample):
        resample_once([], rng)


def test_mean_and_variance():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    assert compute_statistic(values, StatisticKind.MEAN) == pytest.approx(5.0)
    assert compute_statistic(values, "variance") == pytest.approx(32.0 / 7.0)


def test_variance_of_short_sequences_is_zero():
    assert compute_statistic([5.0], StatisticKind.VARIANCE) == 0.0
    assert compute_statistic([], StatisticKind.VARIANCE) == 0.0


def test_unknown_statistic():
    with pytest.raises(InvalidParameter):
        compute_statistic([1.0, 2.0], "median")


def test_step_uses_one_resample_for_both_statistics():
    sample = (1.0, 2.0, 3.0, 10.0)
    step = bootstrap_step(sample, np.random.default_rng(9))
    resample = resample_once(sample, np.random.default_rng(9))
    assert step.mean == compute_statistic(resample, StatisticKind.MEAN)
    assert step.variance == compute_statistic(resample, StatisticKind.VARIANCE)
