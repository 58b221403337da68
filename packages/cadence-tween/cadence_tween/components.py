"""TweenRun state."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from cadence import TimerId
    from cadence_tween.sinks import Sink


@dataclass
class TweenRun:
    """Mutable state of one linear sweep, owned by a single TweenHandle.

    `current` climbs by `step` every tick until it reaches `target`; the
    value written out is `abs(offset + current)`, so a negative offset turns
    the rising counter into a falling value.
    """

    current: float
    target: float
    step: float
    offset: float
    tick_period: int
    sink: Sink
    unit: str = ""
    on_complete: Callable[[], None] | None = None
    writes: int = 0
    timer_id: TimerId | None = None
