"""Configuration module exports (env names, defaults and protocol constants only)."""

from .models import DEFAULT_GEMINI_MODEL
from .websocket import WS_ENDPOINT_PATH
from .limits import DEFAULT_MAX_CONCURRENT_CONNECTIONS

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_MAX_CONCURRENT_CONNECTIONS",
    "WS_ENDPOINT_PATH",
]
