"""cadence-bounce - Decaying rise/fall oscillation built from tween passes."""
from __future__ import annotations

from cadence_bounce.config import BounceConfig, start_bounce
from cadence_bounce.plan import BouncePass, BouncePlan
from cadence_bounce.scheduler import BounceHandle, schedule_bounce

__all__ = [
    "BouncePlan",
    "BouncePass",
    "BounceHandle",
    "BounceConfig",
    "schedule_bounce",
    "start_bounce",
]
