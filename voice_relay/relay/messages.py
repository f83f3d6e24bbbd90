"""Builders for server -> client messages."""

from __future__ import annotations

from typing import Any

from voice_relay.config.websocket import (
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    WS_TYPE_PONG,
    WS_KEY_MESSAGE,
    WS_TYPE_ERROR,
    WS_KEY_NEEDS_TTS,
    WS_KEY_SESSION_ID,
    WS_TYPE_PROCESSING,
    WS_TYPE_AI_RESPONSE,
    WS_TYPE_SESSION_READY,
    WS_TYPE_INTERRUPTION_ACK,
)


def session_ready(session_id: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_SESSION_READY, WS_KEY_SESSION_ID: session_id}


def ai_response(text: str, *, needs_tts: bool) -> dict[str, Any]:
    """Build an `ai_response`.

    Replies to text (or to the placeholder transcript) ask the client to speak
    them. Replies from native-audio models carry an explicit `audio: null`.
    """
    if needs_tts:
        return {WS_KEY_TYPE: WS_TYPE_AI_RESPONSE, WS_KEY_TEXT: text, WS_KEY_NEEDS_TTS: True}
    return {WS_KEY_TYPE: WS_TYPE_AI_RESPONSE, WS_KEY_TEXT: text, WS_KEY_AUDIO: None}


def processing(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_PROCESSING, WS_KEY_MESSAGE: message}


def interruption_acknowledged(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_INTERRUPTION_ACK, WS_KEY_MESSAGE: message}


def error(message: str) -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_ERROR, WS_KEY_MESSAGE: message}


def pong() -> dict[str, Any]:
    return {WS_KEY_TYPE: WS_TYPE_PONG}


__all__ = [
    "ai_response",
    "error",
    "interruption_acknowledged",
    "pong",
    "processing",
    "session_ready",
]
