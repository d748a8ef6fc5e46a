"""Synchronous multicast notification point."""
from __future__ import annotations

from tick_timers.types import Listener


class Event:
    """Ordered listener list. ``emit`` calls every listener in registration order."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def emit(self) -> None:
        # Listeners added or removed while emitting take effect next time.
        for listener in list(self._listeners):
            listener()

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        return True
