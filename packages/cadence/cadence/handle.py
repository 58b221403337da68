"""Handle - cancellable result of starting an animation."""
from __future__ import annotations

from typing import Callable

RUNNING = "running"
COMPLETED = "completed"
CANCELLED = "cancelled"
FAILED = "failed"

DoneCallback = Callable[["Handle"], None]


class Handle:
    """Tracks one running animation until it completes, fails or is cancelled.

    Subclasses release their timers in `_on_cancel` and call `_finish` exactly
    once when the animation ends.
    """

    def __init__(self) -> None:
        self._state = RUNNING
        self._error: BaseException | None = None
        self._done_callbacks: list[DoneCallback] = []

    @property
    def state(self) -> str:
        return self._state

    @property
    def done(self) -> bool:
        return self._state != RUNNING

    @property
    def cancelled(self) -> bool:
        return self._state == CANCELLED

    @property
    def failed(self) -> bool:
        return self._state == FAILED

    @property
    def error(self) -> BaseException | None:
        return self._error

    def cancel(self) -> bool:
        """Stop a running animation. Returns False if it had already finished."""
        if self.done:
            return False
        self._on_cancel()
        self._finish(CANCELLED)
        return True

    def add_done_callback(self, fn: DoneCallback) -> None:
        if self.done:
            fn(self)
            return
        self._done_callbacks.append(fn)

    def _on_cancel(self) -> None:
        pass

    def _finish(self, state: str, error: BaseException | None = None) -> None:
        if self.done:
            return
        self._state = state
        self._error = error
        callbacks = self._done_callbacks
        self._done_callbacks = []
        for fn in callbacks:
            fn(self)
