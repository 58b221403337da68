"""Tests for the asyncio-backed timer host."""
from __future__ import annotations

import asyncio

import pytest

from cadence import AsyncioTimers, Handle, TimerHost, wait_done
from cadence.handle import COMPLETED, FAILED


class TestAsyncioTimers:
    def test_interval_fires_until_cleared(self) -> None:
        async def scenario() -> list[int]:
            timers = AsyncioTimers()
            fired: list[int] = []
            ids: dict[str, int] = {}

            def cb() -> None:
                fired.append(len(fired))
                if len(fired) == 3:
                    timers.clear_interval(ids["i"])

            ids["i"] = timers.set_interval(cb, 1)
            await asyncio.sleep(0.1)
            assert timers.pending == 0
            return fired

        assert asyncio.run(scenario()) == [0, 1, 2]

    def test_timeout_fires_once(self) -> None:
        async def scenario() -> list[str]:
            timers = AsyncioTimers()
            fired: list[str] = []
            timers.set_timeout(lambda: fired.append("t"), 1)
            await asyncio.sleep(0.05)
            assert timers.pending == 0
            return fired

        assert asyncio.run(scenario()) == ["t"]

    def test_clear_timeout_before_due(self) -> None:
        async def scenario() -> list[str]:
            timers = AsyncioTimers()
            fired: list[str] = []
            timer_id = timers.set_timeout(lambda: fired.append("t"), 20)
            timers.clear_timeout(timer_id)
            await asyncio.sleep(0.05)
            return fired

        assert asyncio.run(scenario()) == []

    def test_satisfies_protocol(self) -> None:
        async def scenario() -> bool:
            return isinstance(AsyncioTimers(), TimerHost)

        assert asyncio.run(scenario()) is True


class TestWaitDone:
    def test_resolves_with_handle(self) -> None:
        async def scenario() -> Handle:
            h = Handle()
            asyncio.get_running_loop().call_later(0.01, h._finish, COMPLETED)
            return await wait_done(h)

        h = asyncio.run(scenario())
        assert h.state == COMPLETED

    def test_raises_handle_error(self) -> None:
        async def scenario() -> None:
            h = Handle()
            h._finish(FAILED, RuntimeError("sink gone"))
            await wait_done(h)

        with pytest.raises(RuntimeError, match="sink gone"):
            asyncio.run(scenario())

    def test_cancelled_handle_cancels_wait(self) -> None:
        async def scenario() -> bool:
            h = Handle()
            asyncio.get_running_loop().call_soon(h.cancel)
            with pytest.raises(asyncio.CancelledError):
                await wait_done(h)
            return h.cancelled

        assert asyncio.run(scenario()) is True
