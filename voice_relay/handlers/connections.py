"""Admission control for relay sockets."""

from __future__ import annotations

import time
import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Hands out at most `max_connections` slots, one per admitted socket.

    A slot is held from `connect` until `disconnect`, which reports how long
    the socket held it.
    """

    def __init__(self, *, max_connections: int) -> None:
        self._capacity = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._admitted_at: dict[int, float] = {}

    async def connect(self, ws: Any) -> bool:
        async with self._lock:
            if id(ws) in self._admitted_at:
                return True
            if len(self._admitted_at) >= self._capacity:
                logger.warning("relay at capacity (%s sockets); rejecting connection", self._capacity)
                return False
            self._admitted_at[id(ws)] = time.monotonic()
            return True

    async def disconnect(self, ws: Any) -> float:
        """Free the socket's slot. Returns seconds held, 0.0 if it held none."""
        async with self._lock:
            admitted_at = self._admitted_at.pop(id(ws), None)
        if admitted_at is None:
            return 0.0
        return time.monotonic() - admitted_at

    def get_connection_count(self) -> int:
        return len(self._admitted_at)


__all__ = ["ConnectionManager"]
