"""Runtime dependency construction (chat backend + session registry + admission control)."""

from __future__ import annotations

import logging

from voice_relay.state import RuntimeDeps
from voice_relay.chat import ChatBackend
from voice_relay.relay import SessionRegistry
from voice_relay.chat.gemini import GeminiChatBackend
from voice_relay.state.settings import AppSettings
from voice_relay.handlers.connections import ConnectionManager

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(
    settings: AppSettings | None = None,
    *,
    chat_backend: ChatBackend | None = None,
) -> RuntimeDeps:
    settings = settings or load_settings()

    if chat_backend is None:
        chat_backend = GeminiChatBackend(settings.model)
    if not settings.model.api_key:
        logger.warning("GOOGLE_API_KEY is not set; chat sessions will fail to initialize")

    logger.info(
        "runtime: model=%s max_connections=%s",
        settings.model.model_name,
        settings.limits.max_concurrent_connections,
    )

    return RuntimeDeps(
        connections=ConnectionManager(max_connections=settings.limits.max_concurrent_connections),
        sessions=SessionRegistry(),
        chat_backend=chat_backend,
        settings=settings,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
