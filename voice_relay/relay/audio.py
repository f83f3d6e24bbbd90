"""Audio payload normalisation."""

from __future__ import annotations

import base64
import binascii
from typing import Any


def decode_audio_payload(audio: Any) -> bytes:
    """Return raw audio bytes from a client payload.

    Browsers send base64 strings (data-URL prefix already stripped). Raw
    bytes and lists of byte values are accepted as they are.
    """
    if isinstance(audio, (bytes, bytearray)):
        data = bytes(audio)
    elif isinstance(audio, str):
        try:
            data = base64.b64decode(audio.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"audio is not valid base64: {exc}") from exc
    elif isinstance(audio, list):
        try:
            data = bytes(audio)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"audio list must hold byte values: {exc}") from exc
    else:
        raise ValueError(f"unsupported audio payload type: {type(audio).__name__}")

    if not data:
        raise ValueError("audio payload is empty")
    return data


__all__ = ["decode_audio_payload"]
