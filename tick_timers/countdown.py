"""Countdown timer: counts from ``start_time`` down to zero, then stops."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_timers.timer import Timer
from tick_timers.types import RandomSource, uniform

if TYPE_CHECKING:
    from tick_timers.registry import TimerRegistry


class CountdownTimer(Timer):
    """Counts down by the frame delta while running.

    The tick that brings ``current_time`` to zero or below only subtracts;
    the next tick sees ``current_time <= 0`` and calls ``stop``.
    """

    def __init__(
        self,
        registry: TimerRegistry,
        start_time: float,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(registry, start_time)
        self.random = self._rng(rng)

    @classmethod
    def between(
        cls,
        registry: TimerRegistry,
        min_start_time: float,
        max_start_time: float,
        rng: RandomSource | None = None,
    ) -> CountdownTimer:
        """Create a countdown with a start time drawn from [min, max)."""
        source = rng if rng is not None else registry.random
        return cls(registry, uniform(source, min_start_time, max_start_time), source)

    @property
    def progress(self) -> float:
        """Completion in [0, 1]."""
        if self.start_time <= 0:
            return 1.0
        return 1.0 - min(max(self.current_time / self.start_time, 0.0), 1.0)

    @property
    def is_finished(self) -> bool:
        return self.current_time <= 0

    def tick(self, dt: float) -> None:
        if not self.is_running:
            return
        if self.current_time > 0:
            self.current_time -= dt
        else:
            self.stop()

    def reset(self, start_time: float | None = None) -> None:
        """Rewind to ``start_time``, optionally rebinding it first."""
        if start_time is not None:
            self.start_time = start_time
        super().reset()

    def reset_between(self, min_start_time: float, max_start_time: float) -> None:
        self.reset(uniform(self.random, min_start_time, max_start_time))
