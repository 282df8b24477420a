from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from bootstrap_explorer.config import LABEL_DECIMALS, NUM_BINS
from bootstrap_explorer.errors import InvalidParameter


@dataclass(frozen=True)
class Histogram:
    """Display bins: one label and one count per bin, plus the bin edges."""

    labels: List[str] = field(default_factory=list)
    counts: List[int] = field(default_factory=list)
    edges: List[float] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.counts)


def histogram(
    values: Sequence[float], num_bins: int = NUM_BINS, decimals: int = LABEL_DECIMALS
) -> Histogram:
    """
    Equal-width binning of `values` over [min, max].

    Empty input gives an empty histogram. If every value is equal there is a
    single bin labelled with that value. The maximum is clamped into the last
    bin, so the counts always sum to len(values).
    """
    if num_bins < 1:
        raise InvalidParameter(f"num_bins must be at least 1, got {num_bins}")
    if decimals < 0:
        raise InvalidParameter(f"decimals must be non-negative, got {decimals}")

    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return Histogram()

    min_val = float(arr.min())
    max_val = float(arr.max())
    if min_val == max_val:
        return Histogram(
            labels=[f"{min_val:.{decimals}f}"],
            counts=[int(arr.size)],
            edges=[min_val, max_val],
        )

    bin_width = (max_val - min_val) / num_bins
    edges = [min_val + i * bin_width for i in range(num_bins + 1)]
    labels = [
        f"{edges[i]:.{decimals}f} – {edges[i + 1]:.{decimals}f}"
        for i in range(num_bins)
    ]

    idx = np.floor((arr - min_val) / bin_width).astype(int)
    idx = np.minimum(idx, num_bins - 1)
    counts = np.bincount(idx, minlength=num_bins)

    return Histogram(labels=labels, counts=[int(c) for c in counts], edges=edges)
