from __future__ import annotations

import asyncio

import pytest

from voice_relay.handlers.websocket.lifecycle import WebSocketLifecycle
from voice_relay.config.websocket import WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON


class _FakeWebSocket:
    def __init__(self) -> None:
        self.closed = asyncio.Event()
        self.close_code: int | None = None
        self.close_reason: str | None = None

    async def close(self, *, code: int = 1000, reason: str | None = None) -> None:
        self.close_code = code
        self.close_reason = reason or ""
        self.closed.set()


@pytest.mark.asyncio
async def test_websocket_lifecycle_closes_when_idle() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0.05, watchdog_tick_s=0.01)
    lifecycle.start()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    assert ws.close_code == WS_CLOSE_IDLE_CODE
    assert ws.close_reason == WS_CLOSE_IDLE_REASON
    assert lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_keeps_busy_connection_open() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(
        ws,
        is_busy_fn=lambda: True,
        idle_timeout_s=0.05,
        watchdog_tick_s=0.01,
    )
    lifecycle.start()

    await asyncio.sleep(0.2)
    assert not ws.closed.is_set()
    assert not lifecycle.should_close()

    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_touch_defers_idle_close() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0.15, watchdog_tick_s=0.01)
    lifecycle.start()

    for _ in range(5):
        await asyncio.sleep(0.05)
        lifecycle.touch()
    assert not ws.closed.is_set()

    await asyncio.wait_for(ws.closed.wait(), timeout=1.0)
    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_disabled_with_zero_timeout() -> None:
    ws = _FakeWebSocket()
    lifecycle = WebSocketLifecycle(ws, idle_timeout_s=0, watchdog_tick_s=0.01)
    assert lifecycle.start() is None

    await asyncio.sleep(0.05)
    assert not ws.closed.is_set()
    await lifecycle.stop()


@pytest.mark.asyncio
async def test_websocket_lifecycle_defaults_without_explicit_timeouts() -> None:
    lifecycle = WebSocketLifecycle(_FakeWebSocket())

    assert lifecycle.watchdog_tick_s == 5.0
    assert lifecycle.idle_for() < 1.0
    await lifecycle.stop()
