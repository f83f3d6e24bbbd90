"""HTTP server configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_STATIC_DIR = "STATIC_DIR"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

HEALTH_STATUS_HEALTHY = "healthy"

__all__ = [
    "ENV_HOST",
    "ENV_PORT",
    "ENV_STATIC_DIR",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "HEALTH_STATUS_HEALTHY",
]
