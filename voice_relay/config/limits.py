"""Admission control and rate limit configuration (env-resolved constants only)."""

from __future__ import annotations

ENV_MAX_CONCURRENT_CONNECTIONS = "MAX_CONCURRENT_CONNECTIONS"
ENV_WS_MESSAGE_WINDOW_SECONDS = "WS_MESSAGE_WINDOW_SECONDS"
ENV_WS_MAX_MESSAGES_PER_WINDOW = "WS_MAX_MESSAGES_PER_WINDOW"

DEFAULT_MAX_CONCURRENT_CONNECTIONS = 100
DEFAULT_WS_MESSAGE_WINDOW_SECONDS = 60.0
DEFAULT_WS_MAX_MESSAGES_PER_WINDOW = 120

__all__ = [
    "ENV_MAX_CONCURRENT_CONNECTIONS",
    "ENV_WS_MESSAGE_WINDOW_SECONDS",
    "ENV_WS_MAX_MESSAGES_PER_WINDOW",
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "DEFAULT_WS_MESSAGE_WINDOW_SECONDS",
    "DEFAULT_WS_MAX_MESSAGES_PER_WINDOW",
]
