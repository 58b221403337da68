"""Tests for the virtual millisecond clock."""

import pytest
from cadence import InvalidParameterError
from cadence.clock import Clock


def test_clock_starts_at_zero():
    """A new clock reads 0 ms."""
    clock = Clock()
    assert clock.now == 0


def test_clock_custom_start():
    clock = Clock(now=250)
    assert clock.now == 250


def test_advance_returns_new_time():
    """advance() moves forward and returns the new reading."""
    clock = Clock()
    assert clock.advance(10) == 10
    assert clock.advance(5) == 15
    assert clock.now == 15


def test_advance_zero_is_allowed():
    clock = Clock(now=7)
    assert clock.advance(0) == 7


def test_advance_backwards_rejected():
    """Negative advances raise InvalidParameterError."""
    clock = Clock()
    with pytest.raises(InvalidParameterError):
        clock.advance(-1)
    assert clock.now == 0


def test_set_moves_forward_only():
    clock = Clock(now=10)
    clock.set(40)
    assert clock.now == 40
    with pytest.raises(InvalidParameterError):
        clock.set(39)


def test_reset():
    """reset() rewinds to 0 or to the given time."""
    clock = Clock()
    clock.advance(100)
    clock.reset()
    assert clock.now == 0
    clock.reset(30)
    assert clock.now == 30


def test_negative_start_rejected():
    with pytest.raises(InvalidParameterError):
        Clock(now=-5)
