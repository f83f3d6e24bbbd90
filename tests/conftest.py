from __future__ import annotations

import asyncio
from typing import Any

import pytest

from voice_relay.errors import ChatBackendError


class FakeChatHandle:
    def __init__(self, *, native_audio: bool, gate: asyncio.Event | None, fail: bool) -> None:
        self.supports_native_audio = native_audio
        self.gate = gate
        self.fail = fail
        self.text_calls: list[str] = []
        self.audio_calls: list[bytes] = []
        self.close_calls = 0

    async def _wait_turn(self, operation: str) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail:
            raise ChatBackendError(operation=operation, detail="upstream unavailable")

    async def send_text(self, text: str) -> str:
        self.text_calls.append(text)
        await self._wait_turn("send_text")
        return f"Reply to: {text}"

    async def send_audio(self, audio: bytes) -> str:
        self.audio_calls.append(audio)
        await self._wait_turn("send_audio")
        return "Reply to voice"

    async def close(self) -> None:
        self.close_calls += 1


class FakeChatBackend:
    def __init__(self, *, native_audio: bool = False, fail_open: bool = False, fail_requests: bool = False) -> None:
        self.native_audio = native_audio
        self.fail_open = fail_open
        self.fail_requests = fail_requests
        self.gate: asyncio.Event | None = None
        self.handles: list[FakeChatHandle] = []

    async def open_chat(self) -> FakeChatHandle:
        if self.fail_open:
            raise ChatBackendError(operation="open_chat", detail="API key not valid")
        handle = FakeChatHandle(native_audio=self.native_audio, gate=self.gate, fail=self.fail_requests)
        self.handles.append(handle)
        return handle


class Outbox:
    """Collects what a session sends to its client."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []

    async def __call__(self, message: dict[str, Any]) -> bool:
        self.sent.append(message)
        return True

    def types(self) -> list[str]:
        return [m["type"] for m in self.sent]


@pytest.fixture
def fake_backend() -> FakeChatBackend:
    return FakeChatBackend()


@pytest.fixture
def native_backend() -> FakeChatBackend:
    return FakeChatBackend(native_audio=True)


@pytest.fixture
def outbox() -> Outbox:
    return Outbox()
