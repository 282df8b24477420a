import logging
import time
from typing import Callable, Optional

from bootstrap_explorer.config import AUTO_RUN_INTERVAL_MS, MAX_STEPS_PER_TICK
from bootstrap_explorer.errors import InvalidParameter

logger = logging.getLogger(__name__)


class AutoRunner:
    """
    Cancellable repeating task that fires `step` once per interval.

    Nothing runs in the background: the owner calls `tick()` periodically
    (the Streamlit app does so from a `run_every` fragment) and every step
    that has fallen due since the previous tick runs there, on the caller's
    thread. A timer step therefore never overlaps a manual step.
    """

    def __init__(
        self,
        step: Callable[[], object],
        clock: Callable[[], float] = time.monotonic,
        max_steps_per_tick: int = MAX_STEPS_PER_TICK,
    ) -> None:
        self._step = step
        self._clock = clock
        self.max_steps_per_tick = max_steps_per_tick
        self._interval_ms: Optional[float] = None
        self._last_fire: float = 0.0

    @property
    def is_running(self) -> bool:
        return self._interval_ms is not None

    @property
    def interval_ms(self) -> Optional[float]:
        return self._interval_ms

    def start(self, interval_ms: float = AUTO_RUN_INTERVAL_MS) -> bool:
        """Starts the task. Returns False (and changes nothing) if already running."""
        if self.is_running:
            return False
        if interval_ms <= 0:
            raise InvalidParameter(f"interval_ms must be positive, got {interval_ms}")
        self._interval_ms = float(interval_ms)
        self._last_fire = self._clock()
        logger.info(f"Auto-run started, one step every {interval_ms} ms")
        return True

    def stop(self) -> bool:
        """Cancels the task. Safe to call at any time; False if it was not running."""
        if not self.is_running:
            return False
        self._interval_ms = None
        logger.info("Auto-run stopped")
        return True

    def tick(self) -> int:
        """Runs the steps due since the last tick and returns how many ran."""
        if not self.is_running:
            return 0

        now = self._clock()
        interval_s = self._interval_ms / 1000.0
        due = int((now - self._last_fire) // interval_s)
        if due <= 0:
            return 0

        if due > self.max_steps_per_tick:
            # Drop the backlog after a long pause instead of replaying it.
            logger.debug(f"Auto-run dropping {due - self.max_steps_per_tick} overdue steps")
            due = self.max_steps_per_tick
            self._last_fire = now
        else:
            self._last_fire += due * interval_s

        ran = 0
        for _ in range(due):
            self._step()
            ran += 1
            # The step may have cancelled the task.
            if not self.is_running:
                break
        return ran
