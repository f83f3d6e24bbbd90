"""Rate limiting utilities for WebSocket message handling."""

from __future__ import annotations

import math

from fastapi import WebSocket

from voice_relay.errors import RateLimitError
from voice_relay.config.websocket import WS_TYPE_PING
from voice_relay.handlers.limits import SlidingWindowRateLimiter

from .errors import send_error

# Keep-alives never count against the budget.
_EXEMPT_TYPES = frozenset({WS_TYPE_PING})


def select_rate_limiter(
    msg_type: str,
    message_limiter: SlidingWindowRateLimiter,
) -> SlidingWindowRateLimiter | None:
    if msg_type in _EXEMPT_TYPES:
        return None
    return message_limiter


async def consume_limiter(ws: WebSocket, limiter: SlidingWindowRateLimiter) -> bool:
    try:
        limiter.consume()
    except RateLimitError as exc:
        retry_in_s = int(max(1, math.ceil(float(exc.retry_in)))) if exc.retry_in else 1
        await send_error(
            ws,
            f"Too many messages: at most {exc.limit} per {int(exc.window_seconds)} seconds; "
            f"retry in {retry_in_s} seconds",
        )
        return False
    return True


__all__ = ["consume_limiter", "select_rate_limiter"]
