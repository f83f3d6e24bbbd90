"""Lifecycle states of a relay session."""

from __future__ import annotations

from enum import Enum


class SessionStatus(str, Enum):
    """`UNINITIALIZED -> READY -> (BUSY <-> READY) -> CLOSED`.

    `FAILED` is entered when the chat handle cannot be opened; the session
    then ignores input until it is closed.
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    BUSY = "busy"
    FAILED = "failed"
    CLOSED = "closed"


__all__ = ["SessionStatus"]
