from .handle import GeminiChatHandle
from .backend import GeminiChatBackend

__all__ = ["GeminiChatBackend", "GeminiChatHandle"]
