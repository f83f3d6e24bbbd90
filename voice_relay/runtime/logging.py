"""Logging initialization."""

from __future__ import annotations

import logging

from voice_relay.state.settings import LoggingSettings
from voice_relay.config.logging import LOG_FORMAT, NOISY_SDK_LOGGERS


def configure_logging(settings: LoggingSettings) -> None:
    # The Gemini SDK logs every HTTP request. Keep it tame unless explicitly enabled.
    sdk_level = logging.NOTSET if settings.show_sdk_logs else logging.WARNING
    for name in NOISY_SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)
    logging.basicConfig(level=settings.level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(settings.level)


__all__ = ["configure_logging"]
