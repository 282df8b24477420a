from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

import numpy as np

from bootstrap_explorer.errors import EmptySample, InvalidParameter


class StatisticKind(str, Enum):
    MEAN = "mean"
    VARIANCE = "variance"

    @classmethod
    def parse(cls, value: Union["StatisticKind", str]) -> "StatisticKind":
        try:
            return cls(value)
        except ValueError:
            raise InvalidParameter(f"Unknown statistic: {value!r}") from None


@dataclass(frozen=True)
class StepResult:
    """Mean and sample variance of one bootstrap resample."""

    mean: float
    variance: float


def resample_once(sample: Sequence[float], rng: np.random.Generator) -> Tuple[float, ...]:
    """
    Draws one bootstrap resample: n indices uniform on [0, n), with replacement.
    """
    n = len(sample)
    if n == 0:
        raise EmptySample("Cannot resample an empty sample.")
    indices = rng.integers(0, n, size=n)
    return tuple(sample[i] for i in indices)


def compute_statistic(values: Sequence[float], kind: Union[StatisticKind, str]) -> float:
    """
    Mean, or sample variance (divisor n-1).

    The variance of fewer than two values is defined as 0.0.
    """
    kind = StatisticKind.parse(kind)
    n = len(values)
    if kind is StatisticKind.MEAN:
        if n == 0:
            raise EmptySample("The mean of an empty sequence is undefined.")
        return float(np.mean(values))
    if n < 2:
        return 0.0
    return float(np.var(values, ddof=1))


def bootstrap_step(sample: Sequence[float], rng: np.random.Generator) -> StepResult:
    # Both statistics come from the same resample so the pair stays coupled.
    resample = resample_once(sample, rng)
    return StepResult(
        mean=compute_statistic(resample, StatisticKind.MEAN),
        variance=compute_statistic(resample, StatisticKind.VARIANCE),
    )
