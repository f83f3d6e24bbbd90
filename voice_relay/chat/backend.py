"""Structural type for the chat API factory shared by all sessions."""

from __future__ import annotations

from typing import Protocol

from .handle import ChatHandle


class ChatBackend(Protocol):
    async def open_chat(self) -> ChatHandle: ...


__all__ = ["ChatBackend"]
