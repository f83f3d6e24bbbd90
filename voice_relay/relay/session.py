"""Per-connection relay session between a client socket and one chat handle."""

from __future__ import annotations

import uuid
import asyncio
import functools
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable, Coroutine

from voice_relay.chat import ChatBackend, ChatHandle
from voice_relay.errors import ChatBackendError
from voice_relay.config.prompts import PLACEHOLDER_TRANSCRIPT
from voice_relay.config.websocket import (
    WS_STATUS_LISTENING,
    WS_ERROR_SESSION_INIT,
    WS_ERROR_REQUEST_FAILED,
    WS_STATUS_PROCESSING_VOICE,
)

from . import messages
from .status import SessionStatus
from .audio import decode_audio_payload

logger = logging.getLogger(__name__)

SendFn = Callable[[dict[str, Any]], Awaitable[bool]]


def new_session_id() -> str:
    return uuid.uuid4().hex[:8]


class RelaySession:
    """Relays one client's turns to its own chat handle.

    At most one request is in flight at a time. Input that arrives while the
    session is busy is dropped without feedback; it is neither queued nor
    rejected. Requests run as tasks so pings and interruptions are answered
    while the chat API is working.
    """

    def __init__(self, *, backend: ChatBackend, send: SendFn, session_id: str | None = None) -> None:
        self.session_id = session_id or new_session_id()
        self._backend = backend
        self._send = send
        self._status = SessionStatus.UNINITIALIZED
        self._handle: ChatHandle | None = None
        self._audio_buffer: list[bytes] = []
        self._request_task: asyncio.Task | None = None
        self._requests_started = 0

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_connected(self) -> bool:
        return self._status in {SessionStatus.READY, SessionStatus.BUSY}

    @property
    def is_processing(self) -> bool:
        return self._status is SessionStatus.BUSY

    @property
    def requests_started(self) -> int:
        return self._requests_started

    async def open(self) -> bool:
        if self._status is not SessionStatus.UNINITIALIZED:
            return self.is_connected

        try:
            handle = await self._backend.open_chat()
        except ChatBackendError:
            logger.exception("session %s: failed to initialize chat", self.session_id)
            if self._status is SessionStatus.CLOSED:
                return False
            self._status = SessionStatus.FAILED
            await self._send(messages.error(WS_ERROR_SESSION_INIT))
            return False

        if self._status is SessionStatus.CLOSED:
            # Closed while the chat was being opened.
            await handle.close()
            return False

        self._handle = handle
        self._status = SessionStatus.READY
        await self._send(messages.session_ready(self.session_id))
        logger.info("session %s: chat ready", self.session_id)
        return True

    def submit_text(self, text: str) -> asyncio.Task | None:
        if not self._begin_request("text_input"):
            return None
        return self._spawn(self._run_request("text_input", functools.partial(self._text_turn, text)))

    def submit_audio(self, audio: Any) -> asyncio.Task | None:
        if not self._begin_request("audio_data"):
            return None
        return self._spawn(self._run_request("audio_data", functools.partial(self._audio_turn, audio)))

    async def interrupt(self) -> None:
        # The in-flight chat call (if any) keeps running; only local audio is dropped.
        self._audio_buffer.clear()
        await self._send(messages.interruption_acknowledged(WS_STATUS_LISTENING))

    async def close(self) -> None:
        if self._status is SessionStatus.CLOSED:
            return
        self._status = SessionStatus.CLOSED
        self._audio_buffer.clear()

        task, self._request_task = self._request_task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task

        handle, self._handle = self._handle, None
        if handle is not None:
            await handle.close()
        logger.info("session %s: closed", self.session_id)

    def _begin_request(self, kind: str) -> bool:
        if self._status is SessionStatus.BUSY:
            logger.debug("session %s: %s dropped, request already in flight", self.session_id, kind)
            return False
        if self._status is not SessionStatus.READY:
            logger.debug("session %s: %s ignored in state %s", self.session_id, kind, self._status.value)
            return False
        self._status = SessionStatus.BUSY
        self._requests_started += 1
        return True

    def _end_request(self) -> None:
        if self._status is SessionStatus.BUSY:
            self._status = SessionStatus.READY

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._request_task = task
        return task

    def _require_handle(self) -> ChatHandle:
        if self._handle is None:
            raise ChatBackendError(operation="send", detail="session has no chat handle")
        return self._handle

    async def _run_request(self, kind: str, turn: Callable[[], Awaitable[dict[str, Any]]]) -> None:
        try:
            reply = await turn()
        except Exception:
            logger.exception("session %s: %s failed", self.session_id, kind)
            reply = messages.error(WS_ERROR_REQUEST_FAILED)
        finally:
            self._end_request()
        await self._send(reply)

    async def _text_turn(self, text: str) -> dict[str, Any]:
        reply = await self._require_handle().send_text(text)
        return messages.ai_response(reply, needs_tts=True)

    async def _audio_turn(self, audio: Any) -> dict[str, Any]:
        data = decode_audio_payload(audio)
        handle = self._require_handle()
        self._audio_buffer.append(data)
        try:
            if handle.supports_native_audio:
                reply = await handle.send_audio(data)
                return messages.ai_response(reply, needs_tts=False)

            # No speech-to-text yet: a fixed transcript stands in for the recording.
            await self._send(messages.processing(WS_STATUS_PROCESSING_VOICE))
            reply = await handle.send_text(PLACEHOLDER_TRANSCRIPT)
            return messages.ai_response(reply, needs_tts=True)
        finally:
            self._audio_buffer.clear()


__all__ = ["RelaySession", "SendFn", "new_session_id"]
