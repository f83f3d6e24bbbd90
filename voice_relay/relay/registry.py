"""Process-wide registry of live relay sessions."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .session import RelaySession

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Maps each connection to its session for the lifetime of the server."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._sessions: dict[int, RelaySession] = {}

    async def register(self, ws: Any, session: RelaySession) -> None:
        async with self._lock:
            self._sessions[id(ws)] = session

    def get(self, ws: Any) -> RelaySession | None:
        return self._sessions.get(id(ws))

    async def release(self, ws: Any) -> bool:
        """Remove and close the connection's session. Safe to call repeatedly."""
        async with self._lock:
            session = self._sessions.pop(id(ws), None)
        if session is None:
            return False
        await session.close()
        return True

    async def close_all(self) -> None:
        async with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()

        for session in sessions:
            try:
                await session.close()
            except Exception:
                logger.exception("session %s: close failed during shutdown", session.session_id)

    def count(self) -> int:
        return len(self._sessions)


__all__ = ["SessionRegistry"]
