from dataclasses import dataclass
from typing import Optional

# --- Sample controls ---
MIN_SAMPLE_SIZE = 0
MAX_SAMPLE_SIZE = 500
DEFAULT_SAMPLE_SIZE = 30
DEFAULT_DISTRIBUTION = "normal"

# --- Bootstrap controls ---
DEFAULT_RESAMPLES_PER_RUN = 100
MAX_RESAMPLES_PER_RUN = 10_000

# --- Summaries ---
Z_VALUE = 1.96  # fixed ~95% two-sided normal quantile
PERCENTILE_LOW = 0.025
PERCENTILE_HIGH = 0.975

# --- Histograms ---
NUM_BINS = 20
LABEL_DECIMALS = 3

# --- Auto-run ---
AUTO_RUN_INTERVAL_MS = 50
MAX_STEPS_PER_TICK = 200

# --- Guidance text thresholds (number of resamples) ---
FEW_RESAMPLES = 30
MANY_RESAMPLES = 200


@dataclass(frozen=True)
class ExplorerConfig:
    """Tunable defaults for a bootstrap session."""

    sample_size: int = DEFAULT_SAMPLE_SIZE
    distribution: str = DEFAULT_DISTRIBUTION
    resamples_per_run: int = DEFAULT_RESAMPLES_PER_RUN
    num_bins: int = NUM_BINS
    label_decimals: int = LABEL_DECIMALS
    percentile_low: float = PERCENTILE_LOW
    percentile_high: float = PERCENTILE_HIGH
    auto_run_interval_ms: int = AUTO_RUN_INTERVAL_MS
    max_steps_per_tick: int = MAX_STEPS_PER_TICK
    few_resamples: int = FEW_RESAMPLES
    many_resamples: int = MANY_RESAMPLES
    seed: Optional[int] = None
