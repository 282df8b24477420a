from typing import Dict, List, Tuple, Union

from bootstrap_explorer.resampling import StatisticKind, StepResult


class BootstrapAccumulator:
    """
    Append-only sequences of bootstrap statistics, one per StatisticKind.

    Sequences grow together through `record`, one value each per step.
    """

    def __init__(self) -> None:
        self._sequences: Dict[StatisticKind, List[float]] = self._empty()

    @staticmethod
    def _empty() -> Dict[StatisticKind, List[float]]:
        return {kind: [] for kind in StatisticKind}

    def append(self, kind: Union[StatisticKind, str], value: float) -> None:
        self._sequences[StatisticKind.parse(kind)].append(float(value))

    def record(self, step: StepResult) -> None:
        self._sequences[StatisticKind.MEAN].append(step.mean)
        self._sequences[StatisticKind.VARIANCE].append(step.variance)

    def reset(self) -> None:
        # Swap in a fresh mapping so no reader sees one sequence cleared alone.
        self._sequences = self._empty()

    def values(self, kind: Union[StatisticKind, str]) -> Tuple[float, ...]:
        return tuple(self._sequences[StatisticKind.parse(kind)])

    def length(self) -> int:
        return len(self._sequences[StatisticKind.MEAN])

    def __len__(self) -> int:
        return self.length()
