"""Shared type aliases, protocols and errors for cadence."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

TimerId = int
TimerCallback = Callable[[], None]


@runtime_checkable
class TimerHost(Protocol):
    """Schedules repeating and one-shot callbacks in milliseconds.

    This is the only environment service the animation core depends on.
    Clearing an id that is unknown or already cleared is a no-op.
    """

    def set_interval(self, callback: TimerCallback, period_ms: int) -> TimerId:
        ...

    def clear_interval(self, timer_id: TimerId) -> None:
        ...

    def set_timeout(self, callback: TimerCallback, delay_ms: int) -> TimerId:
        ...

    def clear_timeout(self, timer_id: TimerId) -> None:
        ...


class CadenceError(Exception):
    """Base class for all cadence errors."""


class InvalidParameterError(CadenceError, ValueError):
    """Raised when an animation parameter breaks a precondition."""

    def __init__(self, name: str, value: Any, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(message)


class SinkWriteError(CadenceError):
    """Raised when a write sink rejects a value. The cause is chained."""

    def __init__(self, sink: Any, value: str, message: str) -> None:
        self.sink = sink
        self.value = value
        super().__init__(message)
