"""tick-timers - Frame-driven countdown, frequency, sporadic and stopwatch timers."""
from __future__ import annotations

from tick_timers.clock import FixedClock, ManualClock, MonotonicClock
from tick_timers.config import LoopConfig
from tick_timers.countdown import CountdownTimer
from tick_timers.events import Event
from tick_timers.frequency import FrequencyTimer
from tick_timers.loop import TimerLoop
from tick_timers.registry import TimerRegistry
from tick_timers.sporadic import SporadicTimer
from tick_timers.stopwatch import StopwatchTimer
from tick_timers.timer import Timer
from tick_timers.types import Clock, Lap, RandomSource, TimerState, TimeSource

__all__ = [
    "TimerRegistry",
    "TimerLoop",
    "LoopConfig",
    "Timer",
    "TimerState",
    "CountdownTimer",
    "FrequencyTimer",
    "SporadicTimer",
    "StopwatchTimer",
    "Lap",
    "Event",
    "FixedClock",
    "MonotonicClock",
    "ManualClock",
    "Clock",
    "TimeSource",
    "RandomSource",
]
