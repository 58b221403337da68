"""Bounce configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cadence import TimerHost
from cadence_tween import Sink

from cadence_bounce.plan import BouncePass
from cadence_bounce.scheduler import BounceHandle, schedule_bounce


@dataclass(frozen=True)
class BounceConfig:
    """Immutable starting parameters for a bounce chain.

    Attributes:
        passes: Tween runs in the chain. Even counts start with a rise.
        amplitude_start: Counter value every pass starts from.
        amplitude_end: Height of the first bounce.
        amplitude_decay: How much lower each bounce goes than the one before.
        step: Counter increment per tick.
        tick_period: Milliseconds between ticks.
        unit: Suffix appended to every written value ("px", "%", ...).
        delay_ms: Wait before the first pass starts.
    """

    passes: int = 6
    amplitude_start: float = 0.0
    amplitude_end: float = 20.0
    amplitude_decay: float = 5.0
    step: float = 1.0
    tick_period: int = 10
    unit: str = "px"
    delay_ms: int = 0


def start_bounce(
    timers: TimerHost,
    sink: Sink | Callable[[str], None],
    config: BounceConfig | None = None,
    *,
    on_pass: Callable[[BouncePass], None] | None = None,
    on_all_complete: Callable[[BounceHandle], None] | None = None,
) -> BounceHandle:
    """Schedule a bounce chain from `config` (defaults when omitted)."""
    if config is None:
        config = BounceConfig()
    return schedule_bounce(
        timers,
        sink,
        passes=config.passes,
        amplitude_start=config.amplitude_start,
        amplitude_end=config.amplitude_end,
        amplitude_decay=config.amplitude_decay,
        step=config.step,
        tick_period=config.tick_period,
        unit=config.unit,
        delay_ms=config.delay_ms,
        on_pass=on_pass,
        on_all_complete=on_all_complete,
    )
