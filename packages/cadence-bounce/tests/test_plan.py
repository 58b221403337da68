"""Tests for BouncePlan parity and decay."""
from __future__ import annotations

import dataclasses

import pytest

from cadence_bounce import BouncePlan


def _plan(passes: int, end: float = 20.0, decay: float = 5.0) -> BouncePlan:
    return BouncePlan(
        remaining_passes=passes,
        amplitude_start=0.0,
        amplitude_end=end,
        amplitude_decay=decay,
        step_size=1.0,
        tick_period=10,
        unit="px",
    )


class TestParity:
    def test_even_is_rising(self) -> None:
        plan = _plan(4)
        assert plan.rising
        assert not plan.falling
        assert plan.tween_offset == 0.0

    def test_odd_is_falling(self) -> None:
        plan = _plan(3)
        assert plan.falling
        assert plan.tween_offset == -20.0

    def test_fall_offset_uses_absolute_amplitude(self) -> None:
        assert _plan(1, end=-8.0).fall_offset == -8.0

    def test_zero_is_terminal(self) -> None:
        assert _plan(0).terminal
        assert not _plan(1).terminal


class TestNextPlan:
    def test_rising_keeps_amplitude(self) -> None:
        following = _plan(4).next_plan()
        assert following.remaining_passes == 3
        assert following.amplitude_end == 20.0

    def test_falling_decays_amplitude(self) -> None:
        following = _plan(3).next_plan()
        assert following.remaining_passes == 2
        assert following.amplitude_end == 15.0

    def test_other_fields_forwarded(self) -> None:
        plan = _plan(3)
        following = plan.next_plan()
        assert following.amplitude_start == plan.amplitude_start
        assert following.amplitude_decay == plan.amplitude_decay
        assert following.step_size == plan.step_size
        assert following.tick_period == plan.tick_period
        assert following.unit == plan.unit

    def test_plan_is_not_mutated(self) -> None:
        plan = _plan(3)
        plan.next_plan()
        assert plan.remaining_passes == 3
        assert plan.amplitude_end == 20.0

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _plan(2).remaining_passes = 5  # type: ignore[misc]

    @pytest.mark.parametrize("k", [1, 2, 3, 4])
    def test_kth_fall_amplitude(self, k: int) -> None:
        """Across 2k passes the k-th fall runs at initial - (k-1)*decay and leaves initial - k*decay."""
        plan = _plan(2 * k)
        falls = []
        while not plan.terminal:
            if plan.falling:
                falls.append(plan.amplitude_end)
            plan = plan.next_plan()
        assert falls[-1] == 20.0 - (k - 1) * 5.0
        assert plan.amplitude_end == 20.0 - k * 5.0
