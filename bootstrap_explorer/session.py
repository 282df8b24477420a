import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from bootstrap_explorer.accumulator import BootstrapAccumulator
from bootstrap_explorer.autorun import AutoRunner
from bootstrap_explorer.config import ExplorerConfig
from bootstrap_explorer.errors import EmptySample, InvalidParameter
from bootstrap_explorer.generators import (
    Distribution,
    RandomVariateGenerator,
    generate_sample,
)
from bootstrap_explorer.histogram import Histogram, histogram
from bootstrap_explorer.resampling import StatisticKind, StepResult, bootstrap_step
from bootstrap_explorer.summary import SummaryRecord, summarize, summarize_sample

logger = logging.getLogger(__name__)


class BootstrapSession:
    """
    Owns the state of one interactive bootstrap session.

    Holds the base sample, the accumulated bootstrap statistics and the
    auto-run task. All engine calls go through this object; nothing is kept
    in module globals.
    """

    def __init__(
        self,
        config: Optional[ExplorerConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock=None,
    ) -> None:
        self.config = config or ExplorerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.generator = RandomVariateGenerator(rng=self.rng)
        self.distribution = Distribution.parse(self.config.distribution)
        self.sample: Tuple[float, ...] = ()
        self.accumulator = BootstrapAccumulator()

        runner_kwargs = {"max_steps_per_tick": self.config.max_steps_per_tick}
        if clock is not None:
            runner_kwargs["clock"] = clock
        self.auto_runner = AutoRunner(self.bootstrap_step, **runner_kwargs)

    @property
    def num_resamples(self) -> int:
        return self.accumulator.length()

    # --- Sample ---

    def generate_sample(
        self, distribution: Union[Distribution, str], n: int
    ) -> Tuple[float, ...]:
        """Replaces the base sample and clears the bootstrap sequences."""
        # Validation and drawing happen before any state is touched.
        distribution = Distribution.parse(distribution)
        sample = generate_sample(distribution, n, self.generator)

        self.distribution = distribution
        self.sample = sample
        self.reset_bootstrap()
        if not sample:
            self.stop_auto_run()
        logger.info(f"New {distribution.value} sample of size {len(sample)}")
        return sample

    def summarize_sample(self) -> SummaryRecord:
        if not self.sample:
            raise EmptySample("Generate a sample first.")
        return summarize_sample(self.sample)

    # --- Bootstrap ---

    def reset_bootstrap(self) -> None:
        self.accumulator.reset()
        logger.info("Bootstrap sequences cleared")

    def bootstrap_step(self) -> StepResult:
        """One resample; records its mean and variance together."""
        if not self.sample:
            raise EmptySample("Generate a sample before resampling.")
        result = bootstrap_step(self.sample, self.rng)
        self.accumulator.record(result)
        logger.debug(
            f"Step {self.num_resamples}: mean={result.mean:.4f}, variance={result.variance:.4f}"
        )
        return result

    def run_steps(self, k: int) -> int:
        """Runs `k` bootstrap steps in a row and returns how many were recorded."""
        if k < 0:
            raise InvalidParameter(f"Number of resamples must be non-negative, got {k}")
        if k and not self.sample:
            raise EmptySample("Generate a sample before resampling.")
        for _ in range(k):
            self.bootstrap_step()
        return k

    def statistic_values(self, kind: Union[StatisticKind, str]) -> Tuple[float, ...]:
        return self.accumulator.values(kind)

    def summarize_bootstrap(self, kind: Union[StatisticKind, str]) -> SummaryRecord:
        return summarize(
            self.accumulator.values(kind),
            self.config.percentile_low,
            self.config.percentile_high,
        )

    def histogram(
        self, sequence: Sequence[float], num_bins: Optional[int] = None
    ) -> Histogram:
        if num_bins is None:
            num_bins = self.config.num_bins
        return histogram(sequence, num_bins, self.config.label_decimals)

    # --- Auto-run ---

    def start_auto_run(self, interval_ms: Optional[float] = None) -> bool:
        """Starts auto-run; a no-op (False) when already running or with no sample."""
        if not self.sample:
            return False
        if interval_ms is None:
            interval_ms = self.config.auto_run_interval_ms
        return self.auto_runner.start(interval_ms)

    def stop_auto_run(self) -> bool:
        return self.auto_runner.stop()

    @property
    def auto_running(self) -> bool:
        return self.auto_runner.is_running

    def tick(self) -> int:
        return self.auto_runner.tick()

    # --- Guidance ---

    def interpretation(self) -> str:
        """Short guidance text for the current state of the session."""
        b = self.num_resamples
        if not self.sample:
            return "Generate a sample to get started."
        if b == 0:
            return (
                "Click **Step** or **Run N** to build bootstrap distributions "
                "for the mean and variance."
            )
        if b < self.config.few_resamples:
            return "With few resamples, histograms are noisy and intervals can jump around."
        if b < self.config.many_resamples:
            return (
                "As resamples increase, the bootstrap distributions stabilize and "
                "the percentile intervals become more consistent."
            )
        return (
            "With many resamples, compare percentile vs normal-based intervals. "
            "Differences can be more noticeable for skewed data (lognormal/gamma)."
        )
