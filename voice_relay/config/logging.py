"""Logging configuration (env names and defaults only)."""

from __future__ import annotations

ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_SHOW_SDK_LOGS = "SHOW_SDK_LOGS"

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# google-genai and httpx log every request at INFO.
NOISY_SDK_LOGGERS: tuple[str, ...] = ("google_genai", "httpx", "httpcore")

__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_SHOW_SDK_LOGS",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "NOISY_SDK_LOGGERS",
]
