import numpy as np
import pytest

from bootstrap_explorer.errors import InvalidParameter
from bootstrap_explorer.histogram import histogram


def test_empty_input():
    hist = histogram([])
    assert hist.labels == []
    assert hist.counts == []


def test_degenerate_input_is_one_bin():
    hist = histogram([5, 5, 5], 20)
    assert hist.labels == ["5.000"]
    assert hist.counts == [3]


def test_maximum_lands_in_last_bin():
    hist = histogram([1, 2, 3, 4], 4)
    assert hist.counts == [1, 1, 1, 1]
    assert hist.labels[0] == "1.000 – 1.750"
    assert hist.labels[-1] == "3.250 – 4.000"


def test_label_decimals():
    hist = histogram([0.0, 1.0], 2, decimals=1)
    assert hist.labels == ["0.0 – 0.5", "0.5 – 1.0"]


def test_counts_sum_to_length():
    values = np.random.default_rng(0).lognormal(size=997)
    for bins in (1, 7, 20, 64):
        hist = histogram(values, bins)
        assert len(hist.counts) == bins
        assert len(hist.labels) == bins
        assert len(hist.edges) == bins + 1
        assert hist.total == len(values)


def test_awkward_bin_widths_do_not_overflow():
    values = [0.1, 0.2, 0.3, 0.7]
    hist = histogram(values, 3)
    assert sum(hist.counts) == 4
    assert hist.counts[-1] >= 1


@pytest.mark.parametrize("bins", [0, -3])
def test_invalid_bin_count(bins):
    with pytest.raises(InvalidParameter):
        histogram([1.0, 2.0], bins)


def test_recomputed_from_scratch():
    assert histogram([1.0, 2.0, 3.0], 3) == histogram([1.0, 2.0, 3.0], 3)
