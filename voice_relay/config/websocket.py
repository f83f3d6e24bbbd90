"""WebSocket protocol configuration and constants."""

from __future__ import annotations

# Endpoints. Browsers connect to the page origin, scripts may use /ws.
WS_ENDPOINT_PATH = "/"
WS_ALT_ENDPOINT_PATH = "/ws"

# Message keys
WS_KEY_TYPE = "type"
WS_KEY_TEXT = "text"
WS_KEY_AUDIO = "audio"
WS_KEY_MESSAGE = "message"
WS_KEY_SESSION_ID = "sessionId"
WS_KEY_NEEDS_TTS = "needsTTS"

# Client -> server message types
WS_TYPE_AUDIO_DATA = "audio_data"
WS_TYPE_TEXT_INPUT = "text_input"
WS_TYPE_INTERRUPTION = "interruption"
WS_TYPE_PING = "ping"

# Server -> client message types
WS_TYPE_SESSION_READY = "session_ready"
WS_TYPE_AI_RESPONSE = "ai_response"
WS_TYPE_PROCESSING = "processing"
WS_TYPE_INTERRUPTION_ACK = "interruption_acknowledged"
WS_TYPE_ERROR = "error"
WS_TYPE_PONG = "pong"

# Close codes
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_IDLE_CODE = 4000

WS_CLOSE_IDLE_REASON = "idle timeout"

# Idle watchdog. Clients ping every 30s, so the default tolerates five misses.
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
DEFAULT_WS_IDLE_TIMEOUT_S = 150.0
DEFAULT_WS_WATCHDOG_TICK_S = 5.0

# Client-visible error messages
WS_ERROR_SESSION_INIT = "Failed to initialize AI session"
WS_ERROR_REQUEST_FAILED = "Error processing your request. Please try again."
WS_ERROR_INVALID_MESSAGE = "Invalid message format"
WS_ERROR_SERVER_AT_CAPACITY = "Server cannot accept new connections. Please try again later."

# Status messages
WS_STATUS_PROCESSING_VOICE = "Processing your voice input..."
WS_STATUS_LISTENING = "I'm listening..."

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_ALT_ENDPOINT_PATH",
    "WS_KEY_TYPE",
    "WS_KEY_TEXT",
    "WS_KEY_AUDIO",
    "WS_KEY_MESSAGE",
    "WS_KEY_SESSION_ID",
    "WS_KEY_NEEDS_TTS",
    "WS_TYPE_AUDIO_DATA",
    "WS_TYPE_TEXT_INPUT",
    "WS_TYPE_INTERRUPTION",
    "WS_TYPE_PING",
    "WS_TYPE_SESSION_READY",
    "WS_TYPE_AI_RESPONSE",
    "WS_TYPE_PROCESSING",
    "WS_TYPE_INTERRUPTION_ACK",
    "WS_TYPE_ERROR",
    "WS_TYPE_PONG",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "ENV_WS_IDLE_TIMEOUT_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "WS_ERROR_SESSION_INIT",
    "WS_ERROR_REQUEST_FAILED",
    "WS_ERROR_INVALID_MESSAGE",
    "WS_ERROR_SERVER_AT_CAPACITY",
    "WS_STATUS_PROCESSING_VOICE",
    "WS_STATUS_LISTENING",
]
