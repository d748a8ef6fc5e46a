"""Hello Timers -- the smallest tick-timers program.

Demonstrates:
- Creating a registry with a fixed frame rate
- Countdown, frequency and stopwatch timers side by side
- Subscribing to timer events
- Driving everything with a TimerLoop

Run: python examples/basics.py
"""

from tick_timers import (
    CountdownTimer,
    FixedClock,
    FrequencyTimer,
    StopwatchTimer,
    TimerLoop,
    TimerRegistry,
)


def main() -> None:
    print("=== Hello Timers ===\n")

    # 10 frames per second, so every frame is 0.1s.
    registry = TimerRegistry(clock=FixedClock(tps=10), seed=42)
    loop = TimerLoop(registry)

    countdown = CountdownTimer(registry, 1.0)
    beat = FrequencyTimer(registry, 0.3)
    watch = StopwatchTimer(registry)

    beat.on_tick.subscribe(lambda: print(f"  beat   |  stopwatch={watch.current_time:.1f}s"))

    @countdown.on_stop.subscribe
    def finished() -> None:
        lap = watch.add_lap()
        print(f"  done   |  {lap}")
        loop.request_stop()

    countdown.start()
    beat.start()
    watch.start()

    # Plenty of frames; the countdown ends the run.
    loop.run(100)

    print(f"\nDone after {loop.frames} frames. Running timers: {len(registry)}.")


if __name__ == "__main__":
    main()
