"""run_tween - one linear counter sweep on a repeating timer."""
from __future__ import annotations

import logging
from typing import Callable

from cadence import Handle, SinkWriteError, TimerHost
from cadence.handle import COMPLETED, FAILED
from cadence.validate import require_count, require_finite, require_positive

from cadence_tween.components import TweenRun
from cadence_tween.sinks import Sink, as_sink, format_value

logger = logging.getLogger(__name__)


class TweenHandle(Handle):
    """Owns the interval of one TweenRun and releases it on every exit path."""

    def __init__(self, timers: TimerHost, run: TweenRun) -> None:
        super().__init__()
        self._timers = timers
        self._run = run

    @property
    def run(self) -> TweenRun:
        return self._run

    @property
    def writes(self) -> int:
        return self._run.writes

    def _start(self) -> None:
        self._run.timer_id = self._timers.set_interval(self._tick, self._run.tick_period)
        logger.debug(
            "tween %s -> %s by %s every %d ms (offset %s) on timer %d",
            self._run.current,
            self._run.target,
            self._run.step,
            self._run.tick_period,
            self._run.offset,
            self._run.timer_id,
        )

    def _release(self) -> None:
        if self._run.timer_id is not None:
            self._timers.clear_interval(self._run.timer_id)
            self._run.timer_id = None

    def _on_cancel(self) -> None:
        self._release()
        logger.debug("tween cancelled after %d writes", self._run.writes)

    def _tick(self) -> None:
        if self.done:
            return
        run = self._run
        if run.current >= run.target:
            self._complete()
            return

        run.current += run.step
        value = format_value(abs(run.offset + run.current), run.unit)
        try:
            run.sink.write(value)
        except Exception as exc:
            self._release()
            error = SinkWriteError(run.sink, value, f"{run.sink!r} rejected {value!r}: {exc}")
            logger.error("tween stopped: %s", error)
            self._finish(FAILED, error)
            raise error from exc
        run.writes += 1

    def _complete(self) -> None:
        # Timer released and handle completed before on_complete runs: a
        # continuation may arm the next timer, and cancel() inside it is a no-op.
        self._release()
        logger.debug("tween complete after %d writes", self._run.writes)
        self._finish(COMPLETED)
        if self._run.on_complete is not None:
            self._run.on_complete()


def run_tween(
    timers: TimerHost,
    sink: Sink | Callable[[str], None],
    *,
    current: float,
    target: float,
    step: float,
    offset: float = 0.0,
    tick_period: int,
    unit: str = "",
    on_complete: Callable[[], None] | None = None,
) -> TweenHandle:
    """Sweep `current` up to `target` by `step`, one tick every `tick_period` ms.

    Every tick before the bound writes `abs(offset + current)` with `unit`
    to `sink`. The first tick that finds `current >= target` writes
    nothing, disarms the timer and calls `on_complete` once.

    Raises InvalidParameterError before arming anything if a number is not
    finite, `step` is not positive or `tick_period` is not a non-negative int.
    """
    run = TweenRun(
        current=require_finite("current", current),
        target=require_finite("target", target),
        step=require_positive("step", step),
        offset=require_finite("offset", offset),
        tick_period=require_count("tick_period", tick_period),
        sink=as_sink(sink),
        unit=unit,
        on_complete=on_complete,
    )
    handle = TweenHandle(timers, run)
    handle._start()
    return handle
