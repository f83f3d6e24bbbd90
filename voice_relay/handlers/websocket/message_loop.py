"""WebSocket message loop for the chat relay endpoint."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from voice_relay.relay import RelaySession
from voice_relay.handlers.limits import SlidingWindowRateLimiter
from voice_relay.config.websocket import WS_KEY_TYPE, WS_ERROR_INVALID_MESSAGE

from .dispatch import HANDLERS
from .errors import send_error
from .parser import parse_client_message
from .lifecycle import WebSocketLifecycle
from .limits import consume_limiter, select_rate_limiter

logger = logging.getLogger(__name__)


async def _receive_frame(ws: WebSocket) -> str:
    """Return the next frame as text. Binary frames are decoded as UTF-8."""
    message = await ws.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    text = message.get("text")
    if text is not None:
        return text
    data = message.get("bytes") or b""
    return data.decode("utf-8", errors="replace")


async def _recv_text_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[str | None, bool]:
    try:
        message = await asyncio.wait_for(
            _receive_frame(ws),
            timeout=lifecycle.watchdog_tick_s * 2,
        )
        return message, False
    except TimeoutError:
        return None, lifecycle.should_close()


async def _parse_or_send_error(ws: WebSocket, raw: str, session: RelaySession) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw)
    except ValueError as exc:
        logger.warning("session %s: invalid message: %s", session.session_id, exc)
        await send_error(ws, WS_ERROR_INVALID_MESSAGE)
        return None


async def run_message_loop(
    ws: WebSocket,
    lifecycle: WebSocketLifecycle,
    message_limiter: SlidingWindowRateLimiter,
    session: RelaySession,
) -> None:
    try:
        while True:
            raw, should_exit = await _recv_text_with_watchdog(ws, lifecycle)
            if should_exit:
                return
            if raw is None:
                continue

            lifecycle.touch()

            msg = await _parse_or_send_error(ws, raw, session)
            if msg is None:
                continue

            msg_type = msg[WS_KEY_TYPE]
            limiter = select_rate_limiter(msg_type, message_limiter)
            if limiter is not None and not await consume_limiter(ws, limiter):
                continue

            handler = HANDLERS.get(msg_type)
            if handler is None:
                logger.info("session %s: unknown message type %r", session.session_id, msg_type)
                continue
            await handler(ws, session, msg)
    except WebSocketDisconnect:
        return


__all__ = ["run_message_loop"]
