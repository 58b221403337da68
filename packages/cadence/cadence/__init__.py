"""cadence - Interval timers and animation handles for tick-driven tweens."""

from cadence.aio import AsyncioTimers, wait_done
from cadence.clock import Clock
from cadence.handle import Handle
from cadence.timers import MIN_INTERVAL_MS, Interval, Timeout, Timers
from cadence.types import (
    CadenceError,
    InvalidParameterError,
    SinkWriteError,
    TimerCallback,
    TimerHost,
    TimerId,
)

__all__ = [
    "Timers",
    "AsyncioTimers",
    "Clock",
    "Handle",
    "Interval",
    "Timeout",
    "MIN_INTERVAL_MS",
    "TimerHost",
    "TimerId",
    "TimerCallback",
    "CadenceError",
    "InvalidParameterError",
    "SinkWriteError",
    "wait_done",
]
