"""TimerLoop - drives a registry from a frame loop, with lifecycle hooks."""
from __future__ import annotations

import logging
import time
from typing import Callable, cast

from tick_timers.clock import FixedClock
from tick_timers.config import DEFAULT_TPS, LoopConfig
from tick_timers.registry import TimerRegistry
from tick_timers.types import Clock

logger = logging.getLogger(__name__)

Hook = Callable[["TimerLoop"], None]


class TimerLoop:
    """Minimal host for a ``TimerRegistry``.

    Each frame steps the registry's clock and then sweeps the registry
    exactly once. Hosts with their own main loop (pygame, a game engine)
    can skip this class and call ``clock.advance()`` and
    ``registry.advance_all()`` themselves.
    """

    def __init__(self, registry: TimerRegistry, config: LoopConfig | None = None) -> None:
        if not callable(getattr(registry.clock, "advance", None)):
            raise TypeError("registry clock must provide advance()")
        self._registry = registry
        self._clock = cast(Clock, registry.clock)
        self._config = config if config is not None else LoopConfig()
        self._tps = _resolve_tps(self._clock, self._config)
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._frames = 0

    @property
    def registry(self) -> TimerRegistry:
        return self._registry

    @property
    def config(self) -> LoopConfig:
        return self._config

    @property
    def tps(self) -> int:
        """Frame rate ``run_forever`` paces to."""
        return self._tps

    @property
    def frames(self) -> int:
        """Frames stepped by this loop so far."""
        return self._frames

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def step(self) -> None:
        self._clock.advance()
        self._registry.advance_all()
        self._frames += 1

    def run(self, n: int) -> None:
        self._begin()
        for _ in range(n):
            self.step()
            if self._stop_requested:
                break
        self._end()

    def run_forever(self) -> None:
        self._begin()
        frame_time = 1.0 / self._tps if self._config.realtime else 0.0
        while not self._stop_requested:
            start = time.monotonic()
            self.step()
            if self._stop_requested:
                break
            if self._config.realtime:
                sleep_time = frame_time - (time.monotonic() - start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        self._end()

    def _begin(self) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

    def _end(self) -> None:
        for hook in self._stop_hooks:
            hook(self)
        if self._config.clear_on_stop:
            self._registry.clear_all()
        logger.debug("loop ended after %d frame(s)", self._frames)


def _resolve_tps(clock: Clock, config: LoopConfig) -> int:
    # Pacing must match the frame length a FixedClock reports.
    if isinstance(clock, FixedClock):
        if config.tps is not None and config.tps != clock.tps:
            raise ValueError(
                f"tps mismatch: config has {config.tps}, clock has {clock.tps}"
            )
        return clock.tps
    return config.tps if config.tps is not None else DEFAULT_TPS
