"""Chat model configuration (env names and defaults only)."""

from __future__ import annotations

ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_GEMINI_MAX_OUTPUT_TOKENS = "GEMINI_MAX_OUTPUT_TOKENS"
ENV_GEMINI_TEMPERATURE = "GEMINI_TEMPERATURE"
ENV_GEMINI_TOP_P = "GEMINI_TOP_P"
ENV_GEMINI_TOP_K = "GEMINI_TOP_K"
ENV_GEMINI_AUDIO_MIME_TYPE = "GEMINI_AUDIO_MIME_TYPE"

# Development default. Native-audio dialog models accept recorded audio directly.
DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
NATIVE_AUDIO_MODEL_MARKER = "native-audio-dialog"

DEFAULT_GEMINI_MAX_OUTPUT_TOKENS = 512
DEFAULT_GEMINI_TEMPERATURE = 0.7
DEFAULT_GEMINI_TOP_P = 0.8
DEFAULT_GEMINI_TOP_K = 40
DEFAULT_GEMINI_AUDIO_MIME_TYPE = "audio/wav"

__all__ = [
    "ENV_GEMINI_MODEL",
    "ENV_GEMINI_MAX_OUTPUT_TOKENS",
    "ENV_GEMINI_TEMPERATURE",
    "ENV_GEMINI_TOP_P",
    "ENV_GEMINI_TOP_K",
    "ENV_GEMINI_AUDIO_MIME_TYPE",
    "DEFAULT_GEMINI_MODEL",
    "NATIVE_AUDIO_MODEL_MARKER",
    "DEFAULT_GEMINI_MAX_OUTPUT_TOKENS",
    "DEFAULT_GEMINI_TEMPERATURE",
    "DEFAULT_GEMINI_TOP_P",
    "DEFAULT_GEMINI_TOP_K",
    "DEFAULT_GEMINI_AUDIO_MIME_TYPE",
]
