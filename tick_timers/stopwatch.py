"""Stopwatch timer with lap bookkeeping."""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from tick_timers.timer import Timer
from tick_timers.types import Lap

if TYPE_CHECKING:
    from tick_timers.registry import TimerRegistry


class StopwatchTimer(Timer):
    """Counts up from zero while running.

    ``start`` always begins a fresh run: time goes back to zero and laps are
    cleared. Only ``pause``/``resume`` keep the accumulated time.
    """

    def __init__(self, registry: TimerRegistry) -> None:
        super().__init__(registry, 0.0)
        self._laps: dict[int, Lap] = {}
        self._current_lap_number = 0

    @property
    def laps(self) -> Mapping[int, Lap]:
        """Laps keyed by 1-based lap number, in recording order."""
        return MappingProxyType(self._laps)

    @property
    def current_lap_number(self) -> int:
        """Number of the latest lap; 0 before the first lap."""
        return self._current_lap_number

    @property
    def current_lap(self) -> Lap | None:
        return self._laps.get(self._current_lap_number)

    @property
    def lap_count(self) -> int:
        return len(self._laps)

    def tick(self, dt: float) -> None:
        if self.is_running:
            self.current_time += dt

    def start(self) -> None:
        if self.is_running:
            return
        self.current_time = 0.0
        self._clear_laps()
        self._activate()
        self.on_start.emit()

    def reset(self) -> None:
        self.current_time = 0.0
        self._clear_laps()
        self.on_reset.emit()

    def add_lap(self) -> Lap | None:
        """Record a lap at ``current_time``. Returns ``None`` unless running."""
        if not self.is_running:
            return None
        previous = self._laps.get(self._current_lap_number)
        self._current_lap_number += 1
        if previous is None:
            lap = Lap(self._current_lap_number, self.current_time, self.current_time)
        else:
            lap_time = self.current_time - previous.overall_time
            lap = Lap(
                self._current_lap_number,
                lap_time,
                self.current_time,
                lap_time - previous.lap_time,
            )
        self._laps[lap.lap_number] = lap
        return lap

    def get_lap(self, lap_number: int) -> Lap | None:
        """Look up a lap. ``None`` if no such lap was recorded."""
        return self._laps.get(lap_number)

    def _clear_laps(self) -> None:
        self._laps.clear()
        self._current_lap_number = 0
