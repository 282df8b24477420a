import math

import numpy as np
import pytest

from bootstrap_explorer.errors import InvalidParameter
from bootstrap_explorer.generators import (
    Distribution,
    RandomVariateGenerator,
    generate_sample,
    theoretical_pdf,
)


class FixedRng:
    """Stand-in for numpy's Generator that replays a fixed list of uniforms."""

    def __init__(self, uniforms):
        self._uniforms = list(uniforms)

    def random(self):
        return self._uniforms.pop(0)


@pytest.mark.parametrize("distribution", list(Distribution))
@pytest.mark.parametrize("n", [0, 1, 2, 30, 101])
def test_generate_sample_has_exact_length(distribution, n):
    gen = RandomVariateGenerator(seed=1)
    sample = generate_sample(distribution, n, gen)
    assert len(sample) == n
    assert all(math.isfinite(x) for x in sample)


def test_empty_sample_is_valid():
    assert generate_sample("normal", 0) == ()


@pytest.mark.parametrize("n", [-1, 2.5, True, "10"])
def test_generate_sample_rejects_bad_size(n):
    with pytest.raises(InvalidParameter):
        generate_sample(Distribution.NORMAL, n)


def test_same_seed_reproduces_sample():
    a = generate_sample("lognormal", 20, RandomVariateGenerator(seed=42))
    b = generate_sample("lognormal", 20, RandomVariateGenerator(seed=42))
    assert a == b


def test_box_muller_formula():
    gen = RandomVariateGenerator(rng=FixedRng([0.25, 0.125]))
    expected = math.sqrt(-2.0 * math.log(0.25)) * math.cos(2.0 * math.pi * 0.125)
    assert gen.normal() == pytest.approx(expected)


def test_uniform_redraws_exact_zero():
    gen = RandomVariateGenerator(rng=FixedRng([0.0, 0.0, 0.5]))
    assert gen.uniform() == 0.5


def test_lognormal_is_exp_of_normal():
    uniforms = [0.3, 0.7]
    expected = math.exp(RandomVariateGenerator(rng=FixedRng(uniforms)).normal())
    assert RandomVariateGenerator(rng=FixedRng(uniforms)).lognormal() == pytest.approx(
        expected
    )


def test_gamma_is_sum_of_two_exponentials():
    gen = RandomVariateGenerator(rng=FixedRng([0.5, 0.25]))
    expected = -2.0 * math.log(0.5) - 2.0 * math.log(0.25)
    assert gen.gamma() == pytest.approx(expected)


def test_gamma_only_supports_shape_two():
    gen = RandomVariateGenerator(seed=0)
    with pytest.raises(InvalidParameter):
        gen.gamma(shape=3.0)
    with pytest.raises(InvalidParameter):
        gen.gamma(scale=0.0)


def test_heavy_tailed_uses_uniform_chi2_stand_in():
    gen = RandomVariateGenerator(rng=FixedRng([0.25, 0.125, 0.5]))
    z = math.sqrt(-2.0 * math.log(0.25)) * math.cos(2.0 * math.pi * 0.125)
    chi2_approx = 0.5 * 2.0
    assert gen.heavy_tailed() == pytest.approx(z / math.sqrt(chi2_approx / 2.0))


@pytest.mark.parametrize("df", [0.0, -1.0, float("nan"), float("inf")])
def test_heavy_tailed_rejects_degenerate_df(df):
    gen = RandomVariateGenerator(seed=0)
    with pytest.raises(InvalidParameter):
        gen.heavy_tailed(df=df)


def test_gamma_sample_mean_is_close_to_four():
    sample = generate_sample("gamma", 5000, RandomVariateGenerator(seed=7))
    assert all(x > 0 for x in sample)
    assert np.mean(sample) == pytest.approx(4.0, abs=0.25)


def test_normal_sample_moments():
    sample = generate_sample("normal", 5000, RandomVariateGenerator(seed=3))
    assert np.mean(sample) == pytest.approx(0.0, abs=0.1)
    assert np.var(sample, ddof=1) == pytest.approx(1.0, abs=0.1)


def test_stream_is_lazy_and_endless():
    stream = RandomVariateGenerator(seed=5).stream("normal")
    first = [next(stream) for _ in range(3)]
    assert len(set(first)) == 3


def test_parse_accepts_labels_and_rejects_unknown():
    assert Distribution.parse("Gamma (shape=2, scale=2)") is Distribution.GAMMA
    assert Distribution.parse("heavy_tailed") is Distribution.HEAVY_TAILED
    with pytest.raises(InvalidParameter):
        Distribution.parse("cauchy")


def test_theoretical_pdf_integrates_to_about_one():
    x = np.linspace(0.0, 60.0, 60001)
    area = float(np.sum(theoretical_pdf("gamma", x)) * (x[1] - x[0]))
    assert area == pytest.approx(1.0, abs=1e-3)
