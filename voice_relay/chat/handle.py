"""Structural type for a single chat conversation owned by one session."""

from __future__ import annotations

from typing import Protocol


class ChatHandle(Protocol):
    @property
    def supports_native_audio(self) -> bool: ...

    async def send_text(self, text: str) -> str: ...

    async def send_audio(self, audio: bytes) -> str: ...

    async def close(self) -> None: ...


__all__ = ["ChatHandle"]
