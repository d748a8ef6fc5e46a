"""Sporadic timer: pulses at random intervals within a range."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_timers.events import Event
from tick_timers.timer import Timer
from tick_timers.types import RandomSource, uniform

if TYPE_CHECKING:
    from tick_timers.registry import TimerRegistry


class SporadicTimer(Timer):
    """Like ``FrequencyTimer``, but the threshold is redrawn from
    ``[min_frequency, max_frequency)`` on construction, on every crossing
    and on every reset.
    """

    def __init__(
        self,
        registry: TimerRegistry,
        min_frequency: float,
        max_frequency: float,
        rng: RandomSource | None = None,
    ) -> None:
        _check_range(min_frequency, max_frequency)
        super().__init__(registry, 0.0)
        self.min_frequency = min_frequency
        self.max_frequency = max_frequency
        self.random = self._rng(rng)
        self.on_tick = Event()
        self.current_frequency = 0.0
        self._redraw()

    def tick(self, dt: float) -> None:
        if not self.is_running:
            return
        self.current_time += dt
        if self.current_time >= self.current_frequency:
            self.current_time = 0.0
            self._redraw()
            self.on_tick.emit()

    def reset(
        self,
        min_frequency: float | None = None,
        max_frequency: float | None = None,
    ) -> None:
        """Rewind to zero and draw a new threshold, optionally from a new range.

        An inverted range raises ``ValueError`` before any state changes.
        """
        lo = self.min_frequency if min_frequency is None else min_frequency
        hi = self.max_frequency if max_frequency is None else max_frequency
        _check_range(lo, hi)
        self.min_frequency = lo
        self.max_frequency = hi
        self.current_time = 0.0
        self._redraw()
        self.on_reset.emit()

    def _redraw(self) -> None:
        self.current_frequency = uniform(self.random, self.min_frequency, self.max_frequency)


def _check_range(lo: float, hi: float) -> None:
    if lo > hi:
        raise ValueError("min_frequency must not exceed max_frequency")
