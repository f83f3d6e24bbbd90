"""Client message parsing/validation for the chat relay protocol."""

from __future__ import annotations

import json
from typing import Any

from voice_relay.config.websocket import (
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    WS_TYPE_AUDIO_DATA,
    WS_TYPE_TEXT_INPUT,
)


def _require_text(msg: dict[str, Any]) -> None:
    text = msg.get(WS_KEY_TEXT)
    if not isinstance(text, str) or not text.strip():
        raise ValueError("text_input requires non-empty 'text'")
    msg[WS_KEY_TEXT] = text.strip()


def _require_audio(msg: dict[str, Any]) -> None:
    audio = msg.get(WS_KEY_AUDIO)
    if isinstance(audio, str) and audio.strip():
        return
    if isinstance(audio, list) and audio:
        return
    raise ValueError("audio_data requires 'audio' (base64 string)")


_FIELD_VALIDATORS = {
    WS_TYPE_TEXT_INPUT: _require_text,
    WS_TYPE_AUDIO_DATA: _require_audio,
}


def parse_client_message(raw: str) -> dict[str, Any]:
    """Parse one inbound frame into a message dict with a normalized `type`.

    Unknown types pass through; the message loop decides what to do with them.
    """
    try:
        msg = json.loads(raw)
    except Exception as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ValueError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ValueError("message missing non-empty 'type'")
    msg[WS_KEY_TYPE] = msg_type.strip()

    validator = _FIELD_VALIDATORS.get(msg[WS_KEY_TYPE])
    if validator is not None:
        validator(msg)
    return msg


__all__ = ["parse_client_message"]
