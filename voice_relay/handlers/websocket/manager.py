"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import functools
import contextlib

from fastapi import WebSocket

from voice_relay.relay import RelaySession
from voice_relay.runtime.dependencies import RuntimeDeps
from voice_relay.handlers.limits import SlidingWindowRateLimiter
from voice_relay.config.websocket import WS_CLOSE_BUSY_CODE, WS_ERROR_SERVER_AT_CAPACITY

from .lifecycle import WebSocketLifecycle
from .message_loop import run_message_loop
from .errors import safe_send_json, reject_connection

logger = logging.getLogger(__name__)


def _create_rate_limiter(runtime_deps: RuntimeDeps) -> SlidingWindowRateLimiter:
    return SlidingWindowRateLimiter(
        limit=runtime_deps.settings.limits.ws_max_messages_per_window,
        window_seconds=runtime_deps.settings.limits.ws_message_window_seconds,
    )


async def _prepare_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.connect(ws):
        await reject_connection(
            ws,
            message=WS_ERROR_SERVER_AT_CAPACITY,
            close_code=WS_CLOSE_BUSY_CODE,
        )
        return False

    try:
        await ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.disconnect(ws)
        raise
    return True


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    lifecycle: WebSocketLifecycle | None = None
    session: RelaySession | None = None
    admitted = False
    try:
        if not await _prepare_connection(ws, runtime_deps):
            return
        admitted = True

        session = RelaySession(
            backend=runtime_deps.chat_backend,
            send=functools.partial(safe_send_json, ws),
        )
        await runtime_deps.sessions.register(ws, session)
        logger.info(
            "WebSocket connection accepted session_id=%s. Active: %s",
            session.session_id,
            runtime_deps.connections.get_connection_count(),
        )

        lifecycle = WebSocketLifecycle(
            ws,
            is_busy_fn=lambda: session is not None and session.is_processing,
            idle_timeout_s=runtime_deps.settings.websocket.idle_timeout_s,
            watchdog_tick_s=runtime_deps.settings.websocket.watchdog_tick_s,
        )
        lifecycle.start()

        await session.open()
        await run_message_loop(ws, lifecycle, _create_rate_limiter(runtime_deps), session)
    finally:
        if lifecycle is not None:
            with contextlib.suppress(Exception):
                await lifecycle.stop()

        # Release is idempotent; shutdown may already have closed the session.
        if session is not None:
            with contextlib.suppress(Exception):
                await runtime_deps.sessions.release(ws)

        if admitted:
            held_s = 0.0
            with contextlib.suppress(Exception):
                held_s = await runtime_deps.connections.disconnect(ws)
            logger.info(
                "WebSocket connection closed session_id=%s after %.1fs. Active: %s",
                session.session_id if session is not None else None,
                held_s,
                runtime_deps.connections.get_connection_count(),
            )


__all__ = ["handle_websocket_connection"]
