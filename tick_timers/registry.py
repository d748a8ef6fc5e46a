"""TimerRegistry - the set of running timers and the per-frame sweep."""
from __future__ import annotations

import logging
import os
import random
from typing import TYPE_CHECKING

from tick_timers.clock import FixedClock
from tick_timers.types import TimeSource

if TYPE_CHECKING:
    from tick_timers.timer import Timer

logger = logging.getLogger(__name__)


class TimerRegistry:
    """Tracks running timers and advances them once per frame.

    The host calls ``advance_all`` once per frame and ``clear_all`` at
    teardown. Timers (de)register themselves from ``start``/``stop``/
    ``pause``/``resume``; the registry only holds references, the owning
    code still owns the timers.
    """

    def __init__(self, clock: TimeSource | None = None, seed: int | None = None) -> None:
        self._clock = clock if clock is not None else FixedClock(60)
        # dict as an insertion-ordered set
        self._timers: dict[Timer, None] = {}

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> TimeSource:
        return self._clock

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def seed(self) -> int:
        return self._seed

    def register(self, timer: Timer) -> None:
        """Add ``timer`` to the active set. Already-registered timers are ignored."""
        if timer in self._timers:
            return
        self._timers[timer] = None
        logger.debug("registered %r", timer)

    def deregister(self, timer: Timer) -> None:
        """Remove ``timer`` from the active set. Unknown timers are ignored."""
        if timer not in self._timers:
            return
        del self._timers[timer]
        logger.debug("deregistered %r", timer)

    def advance_all(self) -> None:
        """Tick every timer that was active when the sweep began.

        Timers stopped or paused by an earlier tick in the same sweep are
        skipped; timers registered during the sweep wait for the next one.
        """
        if not self._timers:
            return
        dt = self._clock.dt
        for timer in list(self._timers):
            if timer not in self._timers:
                logger.debug("skipping %r, it left the registry mid-sweep", timer)
                continue
            timer.tick(dt)

    def clear_all(self) -> None:
        """Close every active timer and empty the active set."""
        sweep = list(self._timers)
        for timer in sweep:
            timer.close()
        self._timers.clear()
        if sweep:
            logger.debug("cleared %d timer(s)", len(sweep))

    def timers(self) -> list[Timer]:
        """Active timers in registration order."""
        return list(self._timers)

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, timer: object) -> bool:
        return timer in self._timers
