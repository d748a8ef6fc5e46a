"""Tests for TimerRegistry registration and sweeps."""
from __future__ import annotations

import logging
import random

from tick_timers import (
    CountdownTimer,
    FixedClock,
    FrequencyTimer,
    ManualClock,
    StopwatchTimer,
    Timer,
    TimerRegistry,
)


class RecordingTimer(Timer):
    """Counts ticks and runs an optional action on each one."""

    def __init__(self, registry: TimerRegistry, name: str, log: list[str], action=None) -> None:
        super().__init__(registry, 0.0)
        self.name = name
        self.log = log
        self.action = action
        self.ticks = 0

    def tick(self, dt: float) -> None:
        if not self.is_running:
            return
        self.ticks += 1
        self.log.append(self.name)
        if self.action is not None:
            self.action()


def _registry(dt: float = 1.0) -> TimerRegistry:
    return TimerRegistry(clock=ManualClock(dt), seed=0)


# --- Construction ---


def test_default_clock_is_fixed_sixty():
    registry = TimerRegistry()
    assert isinstance(registry.clock, FixedClock)
    assert registry.clock.tps == 60


def test_seed_is_recorded_and_reproducible():
    a = TimerRegistry(seed=123)
    b = TimerRegistry(seed=123)
    assert a.seed == 123
    assert a.random.random() == b.random.random()


def test_seed_generated_when_omitted():
    registry = TimerRegistry()
    assert isinstance(registry.seed, int)
    assert isinstance(registry.random, random.Random)


# --- Register / Deregister ---


def test_register_is_idempotent():
    registry = _registry()
    timer = StopwatchTimer(registry)
    registry.register(timer)
    registry.register(timer)
    assert len(registry) == 1


def test_deregister_unknown_is_noop():
    registry = _registry()
    registry.deregister(StopwatchTimer(registry))
    assert len(registry) == 0


def test_timers_in_registration_order():
    registry = _registry()
    a, b, c = StopwatchTimer(registry), StopwatchTimer(registry), StopwatchTimer(registry)
    b.start()
    a.start()
    c.start()
    assert registry.timers() == [b, a, c]


def test_timers_returns_copy():
    registry = _registry()
    timer = StopwatchTimer(registry)
    timer.start()
    registry.timers().clear()
    assert timer in registry


# --- advance_all ---


def test_advance_all_empty_is_noop():
    _registry().advance_all()


def test_advance_all_uses_clock_dt():
    clock = ManualClock(0.25)
    registry = TimerRegistry(clock=clock, seed=0)
    watch = StopwatchTimer(registry)
    watch.start()
    registry.advance_all()
    clock.dt = 0.5
    registry.advance_all()
    assert watch.current_time == 0.75


def test_advance_all_ticks_each_timer_once_in_order():
    registry = _registry()
    log: list[str] = []
    timers = [RecordingTimer(registry, name, log) for name in "abc"]
    for timer in timers:
        timer.start()
    registry.advance_all()
    assert log == ["a", "b", "c"]


def test_stop_during_sweep_completes_and_deregisters():
    """A countdown stopping itself mid-sweep does not disturb the others."""
    registry = _registry()
    log: list[str] = []
    before = RecordingTimer(registry, "before", log)
    countdown = CountdownTimer(registry, 0.0)
    after = RecordingTimer(registry, "after", log)
    before.start()
    countdown.start()
    after.start()

    registry.advance_all()

    assert not countdown.is_running
    assert countdown not in registry
    assert log == ["before", "after"]
    assert registry.timers() == [before, after]


def test_timer_registered_mid_sweep_waits_for_next_sweep():
    registry = _registry()
    log: list[str] = []
    late = RecordingTimer(registry, "late", log)
    starter = RecordingTimer(registry, "starter", log, action=late.start)
    starter.start()

    registry.advance_all()
    assert log == ["starter"]
    assert late in registry

    registry.advance_all()
    assert log == ["starter", "starter", "late"]


def test_timer_stopped_by_earlier_timer_is_skipped():
    """A later timer stopped during the sweep does not advance."""
    registry = _registry()
    log: list[str] = []
    victim = RecordingTimer(registry, "victim", log)
    killer = RecordingTimer(registry, "killer", log, action=victim.stop)
    killer.start()
    victim.start()

    registry.advance_all()
    assert log == ["killer"]
    assert victim.ticks == 0
    assert victim not in registry


def test_skipped_timer_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="tick_timers.registry")
    registry = _registry()
    log: list[str] = []
    victim = RecordingTimer(registry, "victim", log)
    killer = RecordingTimer(registry, "killer", log, action=victim.stop)
    killer.start()
    victim.start()
    caplog.clear()
    registry.advance_all()
    assert victim.ticks == 0
    assert "mid-sweep" in caplog.text
    assert repr(victim) in caplog.text


def test_timer_stopped_and_restarted_mid_sweep_ticks_once():
    """Re-registration during a sweep cannot double-tick a timer."""
    registry = _registry()
    log: list[str] = []
    target = RecordingTimer(registry, "target", log)

    def bounce() -> None:
        target.stop()
        target.start()

    first = RecordingTimer(registry, "first", log, action=bounce)
    first.start()
    target.start()

    registry.advance_all()
    assert log == ["first", "target"]


def test_paused_timer_is_not_advanced():
    registry = _registry()
    watch = StopwatchTimer(registry)
    watch.start()
    watch.pause()
    registry.advance_all()
    assert watch.current_time == 0.0


def test_independent_registries():
    """Timers only advance with the registry they were created for."""
    one, two = _registry(), _registry()
    a, b = StopwatchTimer(one), StopwatchTimer(two)
    a.start()
    b.start()
    one.advance_all()
    assert a.current_time == 1.0
    assert b.current_time == 0.0
    assert a not in two


# --- clear_all ---


def test_clear_all_empties_and_stops_everything():
    registry = _registry()
    timers = [CountdownTimer(registry, 3.0), FrequencyTimer(registry, 1.0), StopwatchTimer(registry)]
    for timer in timers:
        timer.start()

    registry.clear_all()

    assert len(registry) == 0
    assert all(not timer.is_running for timer in timers)
    registry.advance_all()
    assert timers[2].current_time == 0.0


def test_clear_all_fires_no_stop_events():
    registry = _registry()
    timer = CountdownTimer(registry, 3.0)
    fired = []
    timer.on_stop.subscribe(lambda: fired.append(True))
    timer.start()
    registry.clear_all()
    assert fired == []


def test_clear_all_on_empty_registry():
    registry = _registry()
    registry.clear_all()
    assert len(registry) == 0


def test_timers_restart_after_clear_all():
    registry = _registry()
    timer = StopwatchTimer(registry)
    timer.start()
    registry.clear_all()
    timer.start()
    registry.advance_all()
    assert timer.current_time == 1.0
