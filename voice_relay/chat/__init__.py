"""Chat API abstractions and the Gemini implementation."""

from .handle import ChatHandle
from .backend import ChatBackend
from .gemini import GeminiChatBackend, GeminiChatHandle

__all__ = ["ChatBackend", "ChatHandle", "GeminiChatBackend", "GeminiChatHandle"]
