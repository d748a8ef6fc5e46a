"""Elapsed-time sources read by the registry once per frame."""
from __future__ import annotations

import time
from typing import Callable


class FixedClock:
    """Constant frame delta of ``1 / tps`` seconds."""

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._frame_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._frame_number * self._dt

    def advance(self) -> int:
        self._frame_number += 1
        return self._frame_number

    def reset(self, frame_number: int = 0) -> None:
        self._frame_number = frame_number


class MonotonicClock:
    """Wall-clock frame delta, measured between two ``advance`` calls.

    The first frame has a delta of zero. Deltas are clamped to
    ``[0, max_dt]`` so a stalled host does not dump a huge step into every
    timer at once.
    """

    def __init__(
        self,
        time_source: Callable[[], float] | None = None,
        max_dt: float = 0.25,
    ) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._time_source = time_source or time.monotonic
        self._max_dt = max_dt
        self._last: float | None = None
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self) -> int:
        now = self._time_source()
        if self._last is None:
            self._dt = 0.0
        else:
            self._dt = min(max(0.0, now - self._last), self._max_dt)
        self._last = now
        self._elapsed += self._dt
        self._frame_number += 1
        return self._frame_number

    def reset(self) -> None:
        self._last = None
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0


class ManualClock:
    """Frame delta set by the host, e.g. from pygame's ``Clock.tick()``."""

    def __init__(self, dt: float = 0.0) -> None:
        self.dt = dt
        self._elapsed = 0.0
        self._frame_number = 0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> int:
        if dt is not None:
            self.dt = dt
        self._elapsed += self.dt
        self._frame_number += 1
        return self._frame_number

    def reset(self, dt: float = 0.0) -> None:
        self.dt = dt
        self._elapsed = 0.0
        self._frame_number = 0
