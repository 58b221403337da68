"""AsyncioTimers - TimerHost backed by an asyncio event loop."""
from __future__ import annotations

import asyncio
import logging

from cadence.handle import Handle
from cadence.timers import MIN_INTERVAL_MS
from cadence.types import TimerCallback, TimerId
from cadence.validate import require_count

logger = logging.getLogger(__name__)


class AsyncioTimers:
    """Schedules callbacks with `loop.call_later`.

    Must be created while the loop is running, or be given the loop
    explicitly. Exceptions raised by callbacks go to the loop's exception
    handler; the failing animation handle records them as well.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop if loop is not None else asyncio.get_running_loop()
        self._handles: dict[TimerId, asyncio.TimerHandle] = {}
        self._next_id = 1

    @property
    def pending(self) -> int:
        return len(self._handles)

    def set_interval(self, callback: TimerCallback, period_ms: int) -> TimerId:
        period = max(require_count("period_ms", period_ms), MIN_INTERVAL_MS)
        timer_id = self._allocate_id()
        self._schedule_interval(timer_id, callback, period)
        return timer_id

    def clear_interval(self, timer_id: TimerId) -> None:
        handle = self._handles.pop(timer_id, None)
        if handle is not None:
            handle.cancel()
            logger.debug("timer %d cleared", timer_id)

    def set_timeout(self, callback: TimerCallback, delay_ms: int) -> TimerId:
        delay = require_count("delay_ms", delay_ms)
        timer_id = self._allocate_id()
        self._handles[timer_id] = self._loop.call_later(
            delay / 1000.0, self._fire_timeout, timer_id, callback
        )
        return timer_id

    def clear_timeout(self, timer_id: TimerId) -> None:
        self.clear_interval(timer_id)

    def _allocate_id(self) -> TimerId:
        timer_id = self._next_id
        self._next_id += 1
        return timer_id

    def _schedule_interval(self, timer_id: TimerId, callback: TimerCallback, period: int) -> None:
        self._handles[timer_id] = self._loop.call_later(
            period / 1000.0, self._fire_interval, timer_id, callback, period
        )

    def _fire_interval(self, timer_id: TimerId, callback: TimerCallback, period: int) -> None:
        if timer_id not in self._handles:
            return
        # Re-arm first so a callback clearing its own interval stops it.
        self._schedule_interval(timer_id, callback, period)
        callback()

    def _fire_timeout(self, timer_id: TimerId, callback: TimerCallback) -> None:
        if self._handles.pop(timer_id, None) is None:
            return
        callback()


async def wait_done(handle: Handle) -> Handle:
    """Wait until `handle` finishes.

    Returns the handle on completion, raises its error if it failed and
    raises CancelledError if it was cancelled.
    """
    future: asyncio.Future[Handle] = asyncio.get_running_loop().create_future()

    def _resolve(finished: Handle) -> None:
        if future.done():
            return
        if finished.cancelled:
            future.cancel()
        elif finished.error is not None:
            future.set_exception(finished.error)
        else:
            future.set_result(finished)

    handle.add_done_callback(_resolve)
    return await future
