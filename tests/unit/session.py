from __future__ import annotations

import base64
import asyncio

import pytest

from voice_relay.relay import RelaySession, SessionStatus
from voice_relay.config.prompts import PLACEHOLDER_TRANSCRIPT

WAV_BYTES = b"RIFF\x24\x00\x00\x00WAVEfmt "
WAV_B64 = base64.b64encode(WAV_BYTES).decode("ascii")


async def _open_session(backend, outbox) -> RelaySession:
    session = RelaySession(backend=backend, send=outbox, session_id="abc12345")
    assert await session.open()
    return session


@pytest.mark.asyncio
async def test_open_sends_session_ready_once(fake_backend, outbox) -> None:
    session = await _open_session(fake_backend, outbox)
    assert await session.open()

    assert outbox.sent == [{"type": "session_ready", "sessionId": "abc12345"}]
    assert session.status is SessionStatus.READY
    assert session.is_connected
    assert len(fake_backend.handles) == 1


@pytest.mark.asyncio
async def test_open_failure_reports_error_and_ignores_input(fake_backend, outbox) -> None:
    fake_backend.fail_open = True
    session = RelaySession(backend=fake_backend, send=outbox)

    assert not await session.open()
    assert outbox.sent == [{"type": "error", "message": "Failed to initialize AI session"}]
    assert session.status is SessionStatus.FAILED
    assert session.submit_text("hello") is None
    assert session.submit_audio(WAV_B64) is None
    assert session.requests_started == 0


@pytest.mark.asyncio
async def test_text_input_replies_with_tts_flag(fake_backend, outbox) -> None:
    session = await _open_session(fake_backend, outbox)

    task = session.submit_text("What is the range of RV400?")
    assert task is not None
    await task

    assert outbox.sent[-1] == {
        "type": "ai_response",
        "text": "Reply to: What is the range of RV400?",
        "needsTTS": True,
    }
    assert session.status is SessionStatus.READY


@pytest.mark.asyncio
async def test_request_while_in_flight_is_dropped(fake_backend, outbox) -> None:
    fake_backend.gate = asyncio.Event()
    session = await _open_session(fake_backend, outbox)

    first = session.submit_text("first")
    assert first is not None
    assert session.is_processing
    assert session.submit_text("second") is None
    assert session.submit_audio(WAV_B64) is None

    fake_backend.gate.set()
    await first

    handle = fake_backend.handles[0]
    assert handle.text_calls == ["first"]
    assert handle.audio_calls == []
    assert session.requests_started == 1
    assert outbox.types() == ["session_ready", "ai_response"]


@pytest.mark.asyncio
async def test_interruption_is_acknowledged_without_cancelling(fake_backend, outbox) -> None:
    fake_backend.gate = asyncio.Event()
    session = await _open_session(fake_backend, outbox)

    task = session.submit_text("tell me about the RV1")
    await asyncio.sleep(0)
    await session.interrupt()

    assert outbox.types().count("interruption_acknowledged") == 1
    assert outbox.sent[-1] == {"type": "interruption_acknowledged", "message": "I'm listening..."}
    assert session.is_processing

    fake_backend.gate.set()
    await task
    assert outbox.types()[-1] == "ai_response"


@pytest.mark.asyncio
async def test_request_failure_keeps_session_usable(fake_backend, outbox) -> None:
    fake_backend.fail_requests = True
    session = await _open_session(fake_backend, outbox)

    await session.submit_text("hello")
    assert outbox.sent[-1] == {
        "type": "error",
        "message": "Error processing your request. Please try again.",
    }
    assert session.status is SessionStatus.READY

    fake_backend.handles[0].fail = False
    await session.submit_text("hello again")
    assert outbox.sent[-1]["type"] == "ai_response"


@pytest.mark.asyncio
async def test_audio_without_native_support_uses_placeholder(fake_backend, outbox) -> None:
    session = await _open_session(fake_backend, outbox)

    await session.submit_audio(WAV_B64)

    assert outbox.types() == ["session_ready", "processing", "ai_response"]
    assert outbox.sent[1] == {"type": "processing", "message": "Processing your voice input..."}
    assert outbox.sent[2]["needsTTS"] is True
    assert fake_backend.handles[0].text_calls == [PLACEHOLDER_TRANSCRIPT]


@pytest.mark.asyncio
async def test_audio_with_native_support_forwards_bytes(native_backend, outbox) -> None:
    session = await _open_session(native_backend, outbox)

    await session.submit_audio(WAV_B64)

    assert native_backend.handles[0].audio_calls == [WAV_BYTES]
    assert outbox.sent[-1] == {"type": "ai_response", "text": "Reply to voice", "audio": None}


@pytest.mark.asyncio
async def test_undecodable_audio_is_a_request_failure(fake_backend, outbox) -> None:
    session = await _open_session(fake_backend, outbox)

    await session.submit_audio("@@not-base64@@")

    assert outbox.sent[-1]["type"] == "error"
    assert fake_backend.handles[0].text_calls == []
    assert session.status is SessionStatus.READY


@pytest.mark.asyncio
async def test_close_twice_releases_handle_once(fake_backend, outbox) -> None:
    session = await _open_session(fake_backend, outbox)

    await session.close()
    await session.close()

    assert fake_backend.handles[0].close_calls == 1
    assert session.status is SessionStatus.CLOSED
    assert not session.is_connected
    assert session.submit_text("late") is None


@pytest.mark.asyncio
async def test_close_during_request_drops_the_reply(fake_backend, outbox) -> None:
    fake_backend.gate = asyncio.Event()
    session = await _open_session(fake_backend, outbox)

    session.submit_text("slow question")
    await asyncio.sleep(0)
    await session.close()

    assert outbox.types() == ["session_ready"]
    assert fake_backend.handles[0].close_calls == 1
