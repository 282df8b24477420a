"""
Point and interval estimates for a base sample or a bootstrap sequence.

Two interval constructions are offered:

- Normal approximation: point estimate +/- 1.96 standard errors, with the
  fixed z value of 1.96 (~95%). For the base sample the standard error is
  analytic (sd / sqrt(n) for the mean, var * sqrt(2 / (n-1)) for the
  variance). For a bootstrap sequence the replicate SD is itself the
  standard error, so the half width is 1.96 * sd.
- Percentile: nearest-rank empirical quantiles of a bootstrap sequence,
  index floor(level * (n - 1)) into the ascending sort. No interpolation.

All functions are pure. Empty input raises InsufficientData; a single value
gives sd = 0 and degenerate intervals.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from bootstrap_explorer.config import PERCENTILE_HIGH, PERCENTILE_LOW, Z_VALUE
from bootstrap_explorer.errors import InsufficientData, InvalidParameter


@dataclass(frozen=True)
class Interval:
    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


@dataclass(frozen=True)
class SummaryRecord:
    """Snapshot of the estimates computed from one sequence."""

    count: int
    mean: float
    sd: float
    variance: float
    normal_interval: Interval
    percentile_interval: Optional[Interval] = None
    variance_interval: Optional[Interval] = None


def _require_data(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InsufficientData("No data to summarise.")
    return arr


def mean(values: Sequence[float]) -> float:
    return float(np.mean(_require_data(values)))


def sample_variance(values: Sequence[float]) -> float:
    """Sum of squared deviations over (n-1); 0.0 when n < 2."""
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return 0.0
    return float(np.var(arr, ddof=1))


def sample_sd(values: Sequence[float]) -> float:
    return math.sqrt(sample_variance(values))


def percentile_interval(
    values: Sequence[float],
    low: float = PERCENTILE_LOW,
    high: float = PERCENTILE_HIGH,
) -> Interval:
    """Nearest-rank percentile interval (floor, not round)."""
    if not (0.0 <= low <= high <= 1.0):
        raise InvalidParameter(
            f"Percentile levels must satisfy 0 <= low <= high <= 1, got ({low}, {high})"
        )
    ordered = np.sort(_require_data(values))
    n = ordered.size
    lo_idx = math.floor(low * (n - 1))
    hi_idx = math.floor(high * (n - 1))
    return Interval(float(ordered[lo_idx]), float(ordered[hi_idx]))


def normal_mean_interval(values: Sequence[float]) -> Interval:
    """Wald interval for the mean: mean +/- 1.96 * sd / sqrt(n)."""
    arr = _require_data(values)
    m = float(np.mean(arr))
    se = sample_sd(arr) / math.sqrt(arr.size)
    return Interval(m - Z_VALUE * se, m + Z_VALUE * se)


def normal_variance_interval(values: Sequence[float]) -> Interval:
    """Wald interval for the variance, SE(S^2) ~ S^2 * sqrt(2 / (n-1))."""
    arr = _require_data(values)
    var = sample_variance(arr)
    if arr.size < 2:
        return Interval(var, var)
    se_var = var * math.sqrt(2.0 / (arr.size - 1))
    return Interval(var - Z_VALUE * se_var, var + Z_VALUE * se_var)


def summarize_sample(values: Sequence[float]) -> SummaryRecord:
    """Analytic summary of a base sample (no percentile interval)."""
    arr = _require_data(values)
    var = sample_variance(arr)
    return SummaryRecord(
        count=int(arr.size),
        mean=float(np.mean(arr)),
        sd=math.sqrt(var),
        variance=var,
        normal_interval=normal_mean_interval(arr),
        variance_interval=normal_variance_interval(arr),
    )


def summarize(
    values: Sequence[float],
    low: float = PERCENTILE_LOW,
    high: float = PERCENTILE_HIGH,
) -> SummaryRecord:
    """Summary of a bootstrap statistic sequence."""
    arr = _require_data(values)
    m = float(np.mean(arr))
    var = sample_variance(arr)
    sd = math.sqrt(var)
    return SummaryRecord(
        count=int(arr.size),
        mean=m,
        sd=sd,
        variance=var,
        normal_interval=Interval(m - Z_VALUE * sd, m + Z_VALUE * sd),
        percentile_interval=percentile_interval(arr, low, high),
    )
