"""Idle watchdog for a single relay connection."""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable

from voice_relay.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
)

logger = logging.getLogger(__name__)


class WebSocketLifecycle:
    """Closes a connection that has been silent for `idle_timeout_s`.

    Any inbound frame (including `ping`) counts as activity, and so does every
    tick spent waiting on the chat API. A timeout of zero disables the check.
    """

    def __init__(
        self,
        websocket: Any,
        *,
        is_busy_fn: Callable[[], bool] | None = None,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
    ) -> None:
        self._ws = websocket
        self._is_busy = is_busy_fn or (lambda: False)
        self._idle_timeout_s = DEFAULT_WS_IDLE_TIMEOUT_S if idle_timeout_s is None else float(idle_timeout_s)
        self._watchdog_tick_s = DEFAULT_WS_WATCHDOG_TICK_S if watchdog_tick_s is None else float(watchdog_tick_s)
        self._last_activity = time.monotonic()
        self._closing = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def watchdog_tick_s(self) -> float:
        return self._watchdog_tick_s

    def idle_for(self) -> float:
        return time.monotonic() - self._last_activity

    def touch(self) -> None:
        self._last_activity = time.monotonic()

    def should_close(self) -> bool:
        return self._closing.is_set()

    def start(self) -> asyncio.Task | None:
        if self._idle_timeout_s <= 0:
            return None
        if self._task is None:
            self._task = asyncio.create_task(self._watch())
        return self._task

    async def stop(self) -> None:
        self._closing.set()
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await task

    async def _tick(self) -> bool:
        """Wait one tick. Returns False once the lifecycle is stopping."""
        try:
            await asyncio.wait_for(self._closing.wait(), timeout=self._watchdog_tick_s)
        except TimeoutError:
            return True
        return False

    async def _close_idle(self) -> None:
        logger.info("WebSocket idle for %.0fs; closing connection", self.idle_for())
        self._closing.set()
        with contextlib.suppress(Exception):
            await self._ws.close(code=WS_CLOSE_IDLE_CODE, reason=WS_CLOSE_IDLE_REASON)

    async def _watch(self) -> None:
        try:
            while await self._tick():
                if self._is_busy():
                    self.touch()
                elif self.idle_for() >= self._idle_timeout_s:
                    await self._close_idle()
                    return
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("idle watchdog exiting due to unexpected error", exc_info=True)


__all__ = ["WebSocketLifecycle"]
