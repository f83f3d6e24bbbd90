"""Send helpers for JSON text frames, including error replies."""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from voice_relay.relay import messages

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    # Only send while the socket is open; late replies to a gone client are dropped.
    if ws.client_state is not WebSocketState.CONNECTED:
        return False
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_json(ws: WebSocket, message: dict[str, Any]) -> bool:
    return await safe_send_text(ws, orjson.dumps(message).decode("utf-8"))


async def send_error(ws: WebSocket, message: str) -> bool:
    return await safe_send_json(ws, messages.error(message))


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # Accept so we can send a structured error, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await send_error(ws, message)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "reject_connection",
    "safe_send_json",
    "safe_send_text",
    "send_error",
]
