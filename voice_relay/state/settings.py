"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    static_dir: Path | None


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float


@dataclass(frozen=True, slots=True)
class ModelSettings:
    api_key: str
    model_name: str
    system_instruction: str
    max_output_tokens: int
    temperature: float
    top_p: float
    top_k: int
    audio_mime_type: str


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    level: str
    show_sdk_logs: bool


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    model: ModelSettings
    logging: LoggingSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "LoggingSettings",
    "ModelSettings",
    "ServerSettings",
    "WebSocketSettings",
]
