"""A Gemini chat conversation bound to one relay session."""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types as genai_types

from voice_relay.errors import ChatBackendError

logger = logging.getLogger(__name__)


class GeminiChatHandle:
    """Owns one `google-genai` client and the async chat opened on it.

    The chat keeps the conversation history, so every turn sent here is
    answered in the context of the previous ones.
    """

    def __init__(
        self,
        *,
        client: genai.Client,
        chat: Any,
        model_name: str,
        audio_mime_type: str,
        native_audio: bool,
    ) -> None:
        self._client: genai.Client | None = client
        self._chat: Any = chat
        self._model_name = model_name
        self._audio_mime_type = audio_mime_type
        self._native_audio = native_audio

    @property
    def supports_native_audio(self) -> bool:
        return self._native_audio

    @property
    def closed(self) -> bool:
        return self._client is None

    async def _send(self, operation: str, message: Any) -> str:
        if self._chat is None:
            raise ChatBackendError(operation=operation, detail="chat handle is closed")
        try:
            response = await self._chat.send_message(message)
        except Exception as exc:
            raise ChatBackendError(operation=operation, detail=str(exc)) from exc

        text = (getattr(response, "text", None) or "").strip()
        if not text:
            raise ChatBackendError(operation=operation, detail=f"{self._model_name} returned no text")
        return text

    async def send_text(self, text: str) -> str:
        return await self._send("send_text", text)

    async def send_audio(self, audio: bytes) -> str:
        part = genai_types.Part.from_bytes(data=audio, mime_type=self._audio_mime_type)
        return await self._send("send_audio", part)

    async def close(self) -> None:
        client, self._client = self._client, None
        self._chat = None
        if client is None:
            return
        try:
            await client.aio.aclose()
        except Exception:
            logger.debug("gemini client close failed", exc_info=True)


__all__ = ["GeminiChatHandle"]
