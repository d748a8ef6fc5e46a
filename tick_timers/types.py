"""Shared types and collaborator protocols for tick-timers."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Protocol

Listener = Callable[[], None]


class TimeSource(Protocol):
    """Supplies the elapsed time of the current frame."""

    @property
    def dt(self) -> float: ...


class Clock(TimeSource, Protocol):
    """A time source the host can step forward one frame."""

    def advance(self) -> int: ...


class RandomSource(Protocol):
    """Uniform draws in [0, 1). ``random.Random`` satisfies this."""

    def random(self) -> float: ...


class TimerState(enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True, slots=True)
class Lap:
    """A recorded split of a stopwatch run.

    ``lap_time_difference`` compares this lap with the previous one and is
    ``None`` for the first lap.
    """

    lap_number: int
    lap_time: float
    overall_time: float
    lap_time_difference: float | None = None

    def __str__(self) -> str:
        diff = "N/A" if self.lap_time_difference is None else self.lap_time_difference
        return (
            f"Lap {self.lap_number} [Time: {self.lap_time}, "
            f"Overall: {self.overall_time}, Difference: {diff}]"
        )


def uniform(rng: RandomSource, lo: float, hi: float) -> float:
    """Draw from [lo, hi). Returns ``lo`` for an empty range."""
    if hi <= lo:
        return lo
    value = lo + (hi - lo) * rng.random()
    # Float rounding can land exactly on hi.
    return value if value < hi else lo
