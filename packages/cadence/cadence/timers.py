"""Timers - deterministic timer host, driven by a virtual millisecond clock."""
from __future__ import annotations

import heapq
import logging
import time
from dataclasses import dataclass

from cadence.clock import Clock
from cadence.types import InvalidParameterError, TimerCallback, TimerId
from cadence.validate import require_count

logger = logging.getLogger(__name__)

# Shorter intervals are clamped; a 0 ms interval would fire forever inside one advance.
MIN_INTERVAL_MS = 1


@dataclass
class Interval:
    """Repeating timer. Re-armed every `period` ms until cleared."""

    timer_id: TimerId
    period: int
    due: int
    callback: TimerCallback


@dataclass
class Timeout:
    """One-shot timer. Fires once at `due`, then disarms."""

    timer_id: TimerId
    delay: int
    due: int
    callback: TimerCallback


class Timers:
    """In-process TimerHost whose time only moves when a driver is called.

    Timers fire in due order; timers due at the same instant fire in the
    order they were created. An exception raised by a callback propagates
    out of the driver call that fired it.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else Clock()
        self._timers: dict[TimerId, Interval | Timeout] = {}
        self._queue: list[tuple[int, TimerId]] = []
        self._next_id = 1
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now(self) -> int:
        return self._clock.now

    @property
    def pending(self) -> int:
        """Number of armed timers."""
        return len(self._timers)

    # --- TimerHost ---

    def set_interval(self, callback: TimerCallback, period_ms: int) -> TimerId:
        period = max(require_count("period_ms", period_ms), MIN_INTERVAL_MS)
        timer = Interval(
            timer_id=self._allocate_id(),
            period=period,
            due=self._clock.now + period,
            callback=callback,
        )
        self._arm(timer)
        return timer.timer_id

    def clear_interval(self, timer_id: TimerId) -> None:
        if self._timers.pop(timer_id, None) is not None:
            logger.debug("timer %d cleared at %d ms", timer_id, self._clock.now)

    def set_timeout(self, callback: TimerCallback, delay_ms: int) -> TimerId:
        delay = require_count("delay_ms", delay_ms)
        timer = Timeout(
            timer_id=self._allocate_id(),
            delay=delay,
            due=self._clock.now + delay,
            callback=callback,
        )
        self._arm(timer)
        return timer.timer_id

    def clear_timeout(self, timer_id: TimerId) -> None:
        self.clear_interval(timer_id)

    # --- Drivers ---

    def next_due(self) -> int | None:
        """Due time of the earliest armed timer, or None when idle."""
        while self._queue:
            due, timer_id = self._queue[0]
            if self._is_live(due, timer_id):
                return due
            heapq.heappop(self._queue)
        return None

    def advance(self, ms: int) -> int:
        """Move time forward by `ms`, firing everything that becomes due.

        Returns the number of callbacks fired.
        """
        if ms < 0:
            raise InvalidParameterError("ms", ms, "cannot advance time backwards")
        deadline = self._clock.now + ms
        fired = 0
        while True:
            timer = self._pop_due(deadline)
            if timer is None:
                break
            self._fire(timer)
            fired += 1
        self._clock.set(deadline)
        return fired

    def step(self) -> bool:
        """Jump to the next due time and fire what is due there."""
        due = self.next_due()
        if due is None:
            return False
        self.advance(due - self._clock.now)
        return True

    def run_until_idle(self, limit_ms: int | None = None) -> bool:
        """Step until no timer is armed. Returns False if `limit_ms` ran out first."""
        deadline = None if limit_ms is None else self._clock.now + limit_ms
        while True:
            due = self.next_due()
            if due is None:
                return True
            if deadline is not None and due > deadline:
                self._clock.set(deadline)
                return False
            self.advance(due - self._clock.now)

    def request_stop(self) -> None:
        self._stop_requested = True

    def run_realtime(self, until_idle: bool = True) -> None:
        """Fire timers against the wall clock until idle or stopped."""
        self._stop_requested = False
        origin = time.monotonic() - self._clock.now / 1000.0
        while not self._stop_requested:
            due = self.next_due()
            if due is None:
                if until_idle:
                    break
                due = self._clock.now + MIN_INTERVAL_MS
            sleep_time = origin + due / 1000.0 - time.monotonic()
            if sleep_time > 0:
                time.sleep(sleep_time)
            wall_now = int((time.monotonic() - origin) * 1000)
            self.advance(max(due, wall_now) - self._clock.now)

    # --- Internal ---

    def _allocate_id(self) -> TimerId:
        timer_id = self._next_id
        self._next_id += 1
        return timer_id

    def _arm(self, timer: Interval | Timeout) -> None:
        self._timers[timer.timer_id] = timer
        heapq.heappush(self._queue, (timer.due, timer.timer_id))

    def _is_live(self, due: int, timer_id: TimerId) -> bool:
        # Queue entries go stale when a timer is cleared or re-armed.
        timer = self._timers.get(timer_id)
        return timer is not None and timer.due == due

    def _pop_due(self, deadline: int) -> Interval | Timeout | None:
        while self._queue and self._queue[0][0] <= deadline:
            due, timer_id = heapq.heappop(self._queue)
            if self._is_live(due, timer_id):
                return self._timers[timer_id]
        return None

    def _fire(self, timer: Interval | Timeout) -> None:
        self._clock.set(timer.due)
        if isinstance(timer, Interval):
            timer.due += timer.period
            self._arm(timer)
        else:
            del self._timers[timer.timer_id]
        timer.callback()
