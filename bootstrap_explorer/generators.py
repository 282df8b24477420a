import logging
import math
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

import numpy as np
from scipy import stats

from bootstrap_explorer.errors import InvalidParameter

logger = logging.getLogger(__name__)

GAMMA_SHAPE = 2.0
GAMMA_SCALE = 2.0
HEAVY_TAILED_DF = 2.0


class Distribution(str, Enum):
    NORMAL = "normal"
    LOGNORMAL = "lognormal"
    GAMMA = "gamma"
    HEAVY_TAILED = "heavy_tailed"

    @property
    def label(self) -> str:
        return DISTRIBUTION_LABELS[self]

    @classmethod
    def parse(cls, value: Union["Distribution", str]) -> "Distribution":
        """Accepts a member, its value or its display label."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value or value == DISTRIBUTION_LABELS[member]:
                return member
        raise InvalidParameter(f"Unknown distribution: {value!r}")


DISTRIBUTION_LABELS = {
    Distribution.NORMAL: "Normal (Bell Curve)",
    Distribution.LOGNORMAL: "Lognormal (Right Skewed)",
    Distribution.GAMMA: "Gamma (shape=2, scale=2)",
    Distribution.HEAVY_TAILED: "Heavy-Tailed (t-like, df=2)",
}


class RandomVariateGenerator:
    """
    Produces independent draws from the supported families.

    Every draw is built from fresh uniform(0,1) numbers of the wrapped
    numpy Generator, so a seeded generator reproduces the same sequence.
    Some samplers are deliberately simplified (see `gamma` and
    `heavy_tailed`): they are for illustration, not exact simulation.
    """

    def __init__(
        self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None
    ) -> None:
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self) -> float:
        """Uniform(0,1) draw, redrawn while exactly 0 so that log(u) is finite."""
        u = 0.0
        while u == 0.0:
            u = float(self.rng.random())
        return u

    def normal(self) -> float:
        """Standard normal via Box-Muller."""
        u = self.uniform()
        v = self.uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def lognormal(self) -> float:
        return math.exp(self.normal())

    def gamma(self, shape: float = GAMMA_SHAPE, scale: float = GAMMA_SCALE) -> float:
        """
        Gamma(2, scale) as the sum of two Exponential(scale) draws.

        This is a specialization for shape=2 only, not a general gamma sampler.
        """
        if shape != GAMMA_SHAPE:
            raise InvalidParameter(
                f"Only shape={GAMMA_SHAPE:g} is supported, got shape={shape!r}"
            )
        if not (math.isfinite(scale) and scale > 0):
            raise InvalidParameter(f"Gamma scale must be positive, got {scale!r}")
        e1 = -scale * math.log(self.uniform())
        e2 = -scale * math.log(self.uniform())
        return e1 + e2

    def heavy_tailed(self, df: float = HEAVY_TAILED_DF) -> float:
        """
        t-like heavy-tailed draw: normal / sqrt(chi2_approx / df).

        APPROXIMATION: chi2_approx is uniform(0,1) * df, not a chi-squared
        variate, so this is not a Student-t sampler. It only gives the
        sample visibly heavy tails.
        """
        if not (math.isfinite(df) and df > 0):
            raise InvalidParameter(
                f"Degrees of freedom must be positive and finite, got {df!r}"
            )
        z = self.normal()
        chi2_approx = self.uniform() * df
        return z / math.sqrt(chi2_approx / df)

    def draw(self, distribution: Union[Distribution, str]) -> float:
        distribution = Distribution.parse(distribution)
        if distribution is Distribution.NORMAL:
            return self.normal()
        if distribution is Distribution.LOGNORMAL:
            return self.lognormal()
        if distribution is Distribution.GAMMA:
            return self.gamma()
        return self.heavy_tailed()

    def stream(self, distribution: Union[Distribution, str]) -> Iterator[float]:
        """Endless lazy sequence of draws; each item consumes fresh randomness."""
        distribution = Distribution.parse(distribution)
        while True:
            yield self.draw(distribution)


def generate_sample(
    distribution: Union[Distribution, str],
    n: int,
    generator: Optional[RandomVariateGenerator] = None,
) -> Tuple[float, ...]:
    """Returns a new base sample of exactly `n` draws, in draw order."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 0:
        raise InvalidParameter(f"Sample size must be a non-negative integer, got {n!r}")
    distribution = Distribution.parse(distribution)
    if generator is None:
        generator = RandomVariateGenerator()

    sample = tuple(generator.draw(distribution) for _ in range(int(n)))
    logger.debug(f"Generated {len(sample)} draws from {distribution.value}")
    return sample


def theoretical_pdf(distribution: Union[Distribution, str], x) -> np.ndarray:
    """
    Density of the textbook family each generator imitates.

    Used as a visual reference only. The heavy-tailed generator is an
    approximation, so its histogram will not match the t(2) curve exactly.
    """
    distribution = Distribution.parse(distribution)
    x = np.asarray(x, dtype=float)
    if distribution is Distribution.NORMAL:
        return stats.norm.pdf(x)
    if distribution is Distribution.LOGNORMAL:
        return stats.lognorm.pdf(x, s=1.0)
    if distribution is Distribution.GAMMA:
        return stats.gamma.pdf(x, a=GAMMA_SHAPE, scale=GAMMA_SCALE)
    return stats.t.pdf(x, df=HEAVY_TAILED_DF)
