"""Environment parsing for runtime settings."""

from __future__ import annotations

import os
import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from voice_relay.config.secrets import ENV_GOOGLE_API_KEY
from voice_relay.config.prompts import SYSTEM_INSTRUCTIONS
from voice_relay.state.settings import (
    AppSettings,
    ModelSettings,
    LimitsSettings,
    ServerSettings,
    LoggingSettings,
    WebSocketSettings,
)
from voice_relay.config.logging import ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL, ENV_SHOW_SDK_LOGS
from voice_relay.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_STATIC_DIR,
)
from voice_relay.config.websocket import (
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
)
from voice_relay.config.models import (
    ENV_GEMINI_TOP_K,
    ENV_GEMINI_TOP_P,
    ENV_GEMINI_MODEL,
    DEFAULT_GEMINI_TOP_K,
    DEFAULT_GEMINI_TOP_P,
    DEFAULT_GEMINI_MODEL,
    ENV_GEMINI_TEMPERATURE,
    DEFAULT_GEMINI_TEMPERATURE,
    ENV_GEMINI_AUDIO_MIME_TYPE,
    ENV_GEMINI_MAX_OUTPUT_TOKENS,
    DEFAULT_GEMINI_AUDIO_MIME_TYPE,
    DEFAULT_GEMINI_MAX_OUTPUT_TOKENS,
)
from voice_relay.config.limits import (
    ENV_WS_MESSAGE_WINDOW_SECONDS,
    ENV_MAX_CONCURRENT_CONNECTIONS,
    ENV_WS_MAX_MESSAGES_PER_WINDOW,
    DEFAULT_WS_MESSAGE_WINDOW_SECONDS,
    DEFAULT_MAX_CONCURRENT_CONNECTIONS,
    DEFAULT_WS_MAX_MESSAGES_PER_WINDOW,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_server_settings() -> ServerSettings:
    static_raw = (os.getenv(ENV_STATIC_DIR) or "").strip()
    static_dir = Path(static_raw).expanduser() if static_raw else None
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        port = DEFAULT_PORT
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=port,
        static_dir=static_dir,
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = max(1, _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS))
    msg_window = _float_env(ENV_WS_MESSAGE_WINDOW_SECONDS, DEFAULT_WS_MESSAGE_WINDOW_SECONDS)
    if msg_window <= 0:
        msg_window = DEFAULT_WS_MESSAGE_WINDOW_SECONDS
    msg_limit = max(0, _int_env(ENV_WS_MAX_MESSAGES_PER_WINDOW, DEFAULT_WS_MAX_MESSAGES_PER_WINDOW))

    return LimitsSettings(
        max_concurrent_connections=max_connections,
        ws_message_window_seconds=msg_window,
        ws_max_messages_per_window=msg_limit,
    )


def _load_websocket_settings() -> WebSocketSettings:
    idle_timeout = max(0.0, _float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S))
    watchdog_tick = _float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S)
    if watchdog_tick <= 0:
        watchdog_tick = DEFAULT_WS_WATCHDOG_TICK_S

    return WebSocketSettings(
        idle_timeout_s=idle_timeout,
        watchdog_tick_s=watchdog_tick,
    )


def _load_model_settings() -> ModelSettings:
    # A missing key is not fatal here; the SDK rejects it when a chat is opened.
    api_key = (os.getenv(ENV_GOOGLE_API_KEY) or "").strip()
    return ModelSettings(
        api_key=api_key,
        model_name=_str_env(ENV_GEMINI_MODEL, DEFAULT_GEMINI_MODEL),
        system_instruction=SYSTEM_INSTRUCTIONS,
        max_output_tokens=max(1, _int_env(ENV_GEMINI_MAX_OUTPUT_TOKENS, DEFAULT_GEMINI_MAX_OUTPUT_TOKENS)),
        temperature=_float_env(ENV_GEMINI_TEMPERATURE, DEFAULT_GEMINI_TEMPERATURE),
        top_p=_float_env(ENV_GEMINI_TOP_P, DEFAULT_GEMINI_TOP_P),
        top_k=max(1, _int_env(ENV_GEMINI_TOP_K, DEFAULT_GEMINI_TOP_K)),
        audio_mime_type=_str_env(ENV_GEMINI_AUDIO_MIME_TYPE, DEFAULT_GEMINI_AUDIO_MIME_TYPE),
    )


def _load_logging_settings() -> LoggingSettings:
    level = _str_env(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        level = DEFAULT_LOG_LEVEL
    return LoggingSettings(
        level=level,
        show_sdk_logs=_bool_env(ENV_SHOW_SDK_LOGS, False),
    )


def load_settings(*, env_file: str | Path | None = None) -> AppSettings:
    # Existing environment wins over .env values. Without an explicit file the
    # search starts from the working directory.
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)
    return AppSettings(
        server=_load_server_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        model=_load_model_settings(),
        logging=_load_logging_settings(),
    )


__all__ = ["load_settings"]
