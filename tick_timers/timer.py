"""Timer base class: the running/paused/stopped state machine."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from tick_timers.events import Event
from tick_timers.types import RandomSource, TimerState

if TYPE_CHECKING:
    from tick_timers.registry import TimerRegistry


class Timer(abc.ABC):
    """Base class for every timer variant.

    A timer is RUNNING exactly while it sits in its registry's active set.
    ``start`` and ``resume`` register it, ``stop`` and ``pause`` deregister
    it. State changes and (de)registration always happen before the matching
    event fires, so listeners see a consistent timer.

    Control calls that make no sense in the current state are no-ops:
    starting a running timer, stopping or pausing one that is not running,
    and resuming one that was stopped rather than paused.

    Use the timer as a context manager (or call ``close``) to guarantee it
    leaves the registry when the owning code is done with it.
    """

    def __init__(self, registry: TimerRegistry, start_time: float = 0.0) -> None:
        self._registry = registry
        self.start_time = start_time
        self.current_time = start_time
        self._state = TimerState.STOPPED
        self.on_start = Event()
        self.on_stop = Event()
        self.on_pause = Event()
        self.on_resume = Event()
        self.on_reset = Event()

    @property
    def registry(self) -> TimerRegistry:
        return self._registry

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._state is TimerState.PAUSED

    def start(self) -> None:
        """Start from ``start_time``. No-op while running."""
        if self.is_running:
            return
        self.current_time = self.start_time
        self._activate()
        self.on_start.emit()

    def stop(self) -> None:
        """Stop and leave the registry. No-op unless running."""
        if not self.is_running:
            return
        self._state = TimerState.STOPPED
        self._registry.deregister(self)
        self.on_stop.emit()

    def pause(self) -> None:
        """Suspend advancement, keeping ``current_time``. No-op unless running."""
        if not self.is_running:
            return
        self._state = TimerState.PAUSED
        self._registry.deregister(self)
        self.on_pause.emit()

    def resume(self) -> None:
        """Continue a paused timer. No-op unless paused."""
        if not self.is_paused:
            return
        self._activate()
        self.on_resume.emit()

    def reset(self) -> None:
        """Restore ``current_time`` to ``start_time``. Running state is unchanged."""
        self.current_time = self.start_time
        self.on_reset.emit()

    @abc.abstractmethod
    def tick(self, dt: float) -> None:
        """Advance by one frame of ``dt`` seconds. Must do nothing unless running."""

    def close(self) -> None:
        """Leave the registry and return to STOPPED without firing events.

        Safe to call any number of times, whatever the current state.
        """
        self._state = TimerState.STOPPED
        self._registry.deregister(self)

    def __enter__(self) -> Timer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _activate(self) -> None:
        self._state = TimerState.RUNNING
        self._registry.register(self)

    def _rng(self, rng: RandomSource | None) -> RandomSource:
        return rng if rng is not None else self._registry.random

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(start_time={self.start_time!r}, "
            f"current_time={self.current_time!r}, state={self._state.value})"
        )
