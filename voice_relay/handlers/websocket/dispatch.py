"""Dispatch handlers for client message types."""

from __future__ import annotations

from typing import Any
from collections.abc import Callable, Awaitable

from fastapi import WebSocket

from voice_relay.relay import RelaySession, messages
from voice_relay.config.websocket import (
    WS_KEY_TEXT,
    WS_KEY_AUDIO,
    WS_TYPE_PING,
    WS_TYPE_AUDIO_DATA,
    WS_TYPE_TEXT_INPUT,
    WS_TYPE_INTERRUPTION,
)

from .errors import safe_send_json

HandlerFn = Callable[[WebSocket, RelaySession, dict[str, Any]], Awaitable[None]]


async def _handle_audio_data(_ws: WebSocket, session: RelaySession, msg: dict[str, Any]) -> None:
    session.submit_audio(msg[WS_KEY_AUDIO])


async def _handle_text_input(_ws: WebSocket, session: RelaySession, msg: dict[str, Any]) -> None:
    session.submit_text(msg[WS_KEY_TEXT])


async def _handle_interruption(_ws: WebSocket, session: RelaySession, _msg: dict[str, Any]) -> None:
    await session.interrupt()


async def _handle_ping(ws: WebSocket, _session: RelaySession, _msg: dict[str, Any]) -> None:
    await safe_send_json(ws, messages.pong())


HANDLERS: dict[str, HandlerFn] = {
    WS_TYPE_AUDIO_DATA: _handle_audio_data,
    WS_TYPE_TEXT_INPUT: _handle_text_input,
    WS_TYPE_INTERRUPTION: _handle_interruption,
    WS_TYPE_PING: _handle_ping,
}

__all__ = ["HANDLERS", "HandlerFn"]
