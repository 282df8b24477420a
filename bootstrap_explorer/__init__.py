from bootstrap_explorer.accumulator import BootstrapAccumulator
from bootstrap_explorer.errors import (
    BootstrapError,
    EmptySample,
    InsufficientData,
    InvalidParameter,
)
from bootstrap_explorer.generators import (
    Distribution,
    RandomVariateGenerator,
    generate_sample,
)
from bootstrap_explorer.histogram import Histogram, histogram
from bootstrap_explorer.resampling import (
    StatisticKind,
    StepResult,
    bootstrap_step,
    compute_statistic,
    resample_once,
)
from bootstrap_explorer.session import BootstrapSession
from bootstrap_explorer.summary import (
    Interval,
    SummaryRecord,
    percentile_interval,
    summarize,
    summarize_sample,
)

__version__ = "0.1.0"
