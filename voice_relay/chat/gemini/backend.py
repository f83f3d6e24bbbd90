"""Factory for Gemini chat handles configured from `ModelSettings`."""

from __future__ import annotations

import logging
from collections.abc import Callable

from google import genai
from google.genai import types as genai_types

from voice_relay.errors import ChatBackendError
from voice_relay.state.settings import ModelSettings
from voice_relay.config.models import NATIVE_AUDIO_MODEL_MARKER

from .handle import GeminiChatHandle

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], genai.Client]


def _default_client_factory(api_key: str) -> genai.Client:
    # An empty key falls through to the SDK, which reads GOOGLE_API_KEY or rejects the call.
    return genai.Client(api_key=api_key or None)


def build_generation_config(settings: ModelSettings) -> genai_types.GenerateContentConfig:
    return genai_types.GenerateContentConfig(
        system_instruction=settings.system_instruction,
        max_output_tokens=settings.max_output_tokens,
        temperature=settings.temperature,
        top_p=settings.top_p,
        top_k=settings.top_k,
    )


class GeminiChatBackend:
    def __init__(self, settings: ModelSettings, *, client_factory: ClientFactory | None = None) -> None:
        self._settings = settings
        self._client_factory = client_factory or _default_client_factory
        self._config = build_generation_config(settings)

    @property
    def model_name(self) -> str:
        return self._settings.model_name

    @property
    def supports_native_audio(self) -> bool:
        return NATIVE_AUDIO_MODEL_MARKER in self._settings.model_name

    async def open_chat(self) -> GeminiChatHandle:
        try:
            client = self._client_factory(self._settings.api_key)
            chat = client.aio.chats.create(model=self._settings.model_name, config=self._config)
        except Exception as exc:
            raise ChatBackendError(operation="open_chat", detail=str(exc)) from exc

        logger.debug("gemini chat opened model=%s", self._settings.model_name)
        return GeminiChatHandle(
            client=client,
            chat=chat,
            model_name=self._settings.model_name,
            audio_mime_type=self._settings.audio_mime_type,
            native_audio=self.supports_native_audio,
        )


__all__ = ["GeminiChatBackend", "build_generation_config"]
