"""BouncePlan and BouncePass - per-step parameters of a bounce chain."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class BouncePlan:
    """Parameters for the next pass of a bounce chain.

    A fresh plan is produced for every pass with `next_plan`; an odd
    `remaining_passes` means the pass is falling, an even one rising.
    """

    remaining_passes: int
    amplitude_start: float
    amplitude_end: float
    amplitude_decay: float
    step_size: float
    tick_period: int
    unit: str = ""

    @property
    def terminal(self) -> bool:
        return self.remaining_passes == 0

    @property
    def falling(self) -> bool:
        return self.remaining_passes % 2 != 0

    @property
    def rising(self) -> bool:
        return not self.falling

    @property
    def fall_offset(self) -> float:
        return -abs(self.amplitude_end)

    @property
    def tween_offset(self) -> float:
        """Offset handed to the tween: 0 rising, -|amplitude_end| falling."""
        return self.fall_offset if self.falling else 0.0

    def next_plan(self) -> BouncePlan:
        # Amplitude shrinks once per full oscillation, after the fall.
        amplitude_end = self.amplitude_end
        if self.falling:
            amplitude_end -= self.amplitude_decay
        return replace(
            self,
            remaining_passes=self.remaining_passes - 1,
            amplitude_end=amplitude_end,
        )


@dataclass(frozen=True)
class BouncePass:
    """What one pass of a chain is about to do. Handed to `on_pass` observers."""

    index: int
    direction: str  # "rise" | "fall"
    start: float
    end: float
    offset: float
    remaining_after: int
