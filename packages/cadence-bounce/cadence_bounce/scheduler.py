"""schedule_bounce - chains tween passes into a decaying rise/fall oscillation."""
from __future__ import annotations

import logging
from typing import Callable

from cadence import Handle, TimerHost, TimerId
from cadence.handle import COMPLETED, FAILED
from cadence.validate import require_count, require_finite, require_positive
from cadence_tween import Sink, TweenHandle, as_sink, run_tween

from cadence_bounce.plan import BouncePass, BouncePlan

logger = logging.getLogger(__name__)


class BounceHandle(Handle):
    """Drives one bounce chain; at most one tween pass is alive at a time."""

    def __init__(
        self,
        timers: TimerHost,
        sink: Sink,
        on_pass: Callable[[BouncePass], None] | None = None,
    ) -> None:
        super().__init__()
        self._timers = timers
        self._sink = sink
        self._on_pass = on_pass
        self._tween: TweenHandle | None = None
        self._start_timer: TimerId | None = None
        self._plan: BouncePlan | None = None
        self.passes_run = 0

    @property
    def plan(self) -> BouncePlan | None:
        """Plan of the pass currently running (or about to run)."""
        return self._plan

    @property
    def tween(self) -> TweenHandle | None:
        return self._tween

    def _start(self, plan: BouncePlan, delay_ms: int) -> None:
        if delay_ms > 0 and not plan.terminal:
            self._plan = plan
            self._start_timer = self._timers.set_timeout(
                lambda: self._delayed_start(plan), delay_ms
            )
            logger.debug("bounce of %d passes starts in %d ms", plan.remaining_passes, delay_ms)
            return
        self._schedule(plan)

    def _delayed_start(self, plan: BouncePlan) -> None:
        self._start_timer = None
        self._schedule(plan)

    def _schedule(self, plan: BouncePlan) -> None:
        if self.done:
            return
        self._plan = plan
        if plan.terminal:
            self._tween = None
            logger.debug("bounce complete after %d passes", self.passes_run)
            self._finish(COMPLETED)
            return

        following = plan.next_plan()
        self.passes_run += 1
        direction = "fall" if plan.falling else "rise"
        logger.debug(
            "bounce pass %d (%s) %s -> %s offset %s, %d left",
            self.passes_run,
            direction,
            plan.amplitude_start,
            plan.amplitude_end,
            plan.tween_offset,
            following.remaining_passes,
        )
        if self._on_pass is not None:
            try:
                self._on_pass(
                    BouncePass(
                        index=self.passes_run,
                        direction=direction,
                        start=plan.amplitude_start,
                        end=plan.amplitude_end,
                        offset=plan.tween_offset,
                        remaining_after=following.remaining_passes,
                    )
                )
            except Exception as exc:
                logger.error("bounce stopped at pass %d: on_pass raised %r", self.passes_run, exc)
                self._finish(FAILED, exc)
                raise
            # The observer may have cancelled the chain.
            if self.done:
                return

        tween = run_tween(
            self._timers,
            self._sink,
            current=plan.amplitude_start,
            target=plan.amplitude_end,
            step=plan.step_size,
            offset=plan.tween_offset,
            tick_period=plan.tick_period,
            unit=plan.unit,
            on_complete=lambda: self._schedule(following),
        )
        self._tween = tween
        tween.add_done_callback(self._on_tween_done)

    def _on_tween_done(self, tween: Handle) -> None:
        if tween.failed:
            logger.error("bounce stopped at pass %d: %s", self.passes_run, tween.error)
            self._finish(FAILED, tween.error)

    def _on_cancel(self) -> None:
        if self._start_timer is not None:
            self._timers.clear_timeout(self._start_timer)
            self._start_timer = None
        if self._tween is not None:
            self._tween.cancel()
        logger.debug("bounce cancelled after %d passes", self.passes_run)


def schedule_bounce(
    timers: TimerHost,
    sink: Sink | Callable[[str], None],
    *,
    passes: int,
    amplitude_start: float,
    amplitude_end: float,
    amplitude_decay: float,
    step: float,
    tick_period: int,
    unit: str = "",
    delay_ms: int = 0,
    on_pass: Callable[[BouncePass], None] | None = None,
    on_all_complete: Callable[[BounceHandle], None] | None = None,
) -> BounceHandle:
    """Start a bounce chain of `passes` tween runs on `sink`.

    Even remaining counts rise from `amplitude_start` to `amplitude_end`;
    odd ones fall back using an offset of `-abs(amplitude_end)`, after which
    `amplitude_end` shrinks by `amplitude_decay`. Each pass starts from the
    completion of the previous one. `on_all_complete(handle)` runs once the
    last pass has finished; with `passes=0` that happens before this
    function returns and no timer is ever armed.

    Raises InvalidParameterError for a negative or non-int `passes`, a
    non-positive `step`, non-finite bounds, or a negative period or delay.
    """
    plan = BouncePlan(
        remaining_passes=require_count("passes", passes),
        amplitude_start=require_finite("amplitude_start", amplitude_start),
        amplitude_end=require_finite("amplitude_end", amplitude_end),
        amplitude_decay=require_finite("amplitude_decay", amplitude_decay),
        step_size=require_positive("step", step),
        tick_period=require_count("tick_period", tick_period),
        unit=unit,
    )
    delay_ms = require_count("delay_ms", delay_ms)

    handle = BounceHandle(timers, as_sink(sink), on_pass=on_pass)
    if on_all_complete is not None:
        handle.add_done_callback(_when_completed(on_all_complete))
    handle._start(plan, delay_ms)
    return handle


def _when_completed(
    fn: Callable[[BounceHandle], None],
) -> Callable[[Handle], None]:
    def on_done(handle: Handle) -> None:
        if handle.state == COMPLETED:
            fn(handle)  # type: ignore[arg-type]

    return on_done
