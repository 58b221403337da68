"""Virtual millisecond clock for the deterministic timer host."""

from cadence.types import InvalidParameterError


class Clock:
    def __init__(self, now: int = 0) -> None:
        if now < 0:
            raise InvalidParameterError("now", now, "now must be non-negative")
        self._now = now

    @property
    def now(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise InvalidParameterError("ms", ms, "cannot advance the clock backwards")
        self._now += ms
        return self._now

    def set(self, now: int) -> None:
        if now < self._now:
            raise InvalidParameterError("now", now, "cannot move the clock backwards")
        self._now = now

    def reset(self, now: int = 0) -> None:
        self._now = now
