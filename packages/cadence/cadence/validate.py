"""Precondition checks shared by the tween and bounce entry points."""
from __future__ import annotations

import math
from numbers import Real
from typing import Any

from cadence.types import InvalidParameterError


def require_finite(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, f"{name} must be finite, got {value!r}")
    return value


def require_positive(name: str, value: Any) -> float:
    require_finite(name, value)
    if value <= 0:
        # A non-positive step never reaches the target bound.
        raise InvalidParameterError(name, value, f"{name} must be positive, got {value!r}")
    return value


def require_count(name: str, value: Any) -> int:
    """Check for a non-negative int (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, value, f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidParameterError(name, value, f"{name} must be non-negative, got {value!r}")
    return value
