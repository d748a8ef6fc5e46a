"""Host loop configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TPS = 60


@dataclass(frozen=True)
class LoopConfig:
    """Immutable configuration for ``TimerLoop``.

    Attributes:
        tps: Frames per second for ``run_forever`` pacing. ``None`` follows
            the registry's ``FixedClock`` (or ``DEFAULT_TPS`` for other
            clocks). With a ``FixedClock`` it must equal the clock's tps.
        realtime: Sleep between frames in ``run_forever`` to hold ``tps``.
        clear_on_stop: Close every running timer when a run ends.
    """

    tps: int | None = None
    realtime: bool = True
    clear_on_stop: bool = True

    def __post_init__(self) -> None:
        if self.tps is not None and self.tps <= 0:
            raise ValueError("tps must be positive")
