"""Frequency timer: fires ``on_tick`` every ``frequency`` seconds."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_timers.events import Event
from tick_timers.timer import Timer
from tick_timers.types import RandomSource, uniform

if TYPE_CHECKING:
    from tick_timers.registry import TimerRegistry


class FrequencyTimer(Timer):
    """Accumulates frame deltas and pulses each time ``frequency`` is reached.

    A crossing sets ``current_time`` back to zero and fires ``on_tick`` once.
    Time past the threshold is dropped, and a single ``tick`` fires at most
    once however large the delta.
    """

    def __init__(
        self,
        registry: TimerRegistry,
        frequency: float,
        rng: RandomSource | None = None,
    ) -> None:
        _check_frequency(frequency)
        super().__init__(registry, 0.0)
        self.frequency = frequency
        self.random = self._rng(rng)
        self.on_tick = Event()

    @classmethod
    def between(
        cls,
        registry: TimerRegistry,
        min_frequency: float,
        max_frequency: float,
        rng: RandomSource | None = None,
    ) -> FrequencyTimer:
        """Create a timer with a fixed frequency drawn once from [min, max)."""
        source = rng if rng is not None else registry.random
        return cls(registry, uniform(source, min_frequency, max_frequency), source)

    def tick(self, dt: float) -> None:
        if not self.is_running:
            return
        self.current_time += dt
        if self.current_time >= self.frequency:
            self.current_time = 0.0
            self.on_tick.emit()

    def reset(self, frequency: float | None = None) -> None:
        """Rewind to zero, optionally with a new frequency. State is untouched on error."""
        if frequency is not None:
            _check_frequency(frequency)
            self.frequency = frequency
        self.current_time = 0.0
        self.on_reset.emit()

    def reset_between(self, min_frequency: float, max_frequency: float) -> None:
        self.reset(uniform(self.random, min_frequency, max_frequency))


def _check_frequency(frequency: float) -> None:
    if frequency < 0:
        raise ValueError("frequency must be non-negative")
