"""Per-connection budget for inbound client messages."""

from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable

from voice_relay.errors import RateLimitError

TimeFn = Callable[[], float]


class SlidingWindowRateLimiter:
    """Accepts at most `limit` messages in any `window_seconds` span.

    Only the newest `limit` timestamps are kept: a message fits once the oldest
    of them has aged out of the window. A limit or window of zero disables it.
    """

    def __init__(
        self,
        *,
        limit: int,
        window_seconds: float,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.limit = max(0, int(limit))
        self.window_seconds = max(0.0, float(window_seconds))
        self._clock = now_fn or time.monotonic
        self._stamps: deque[float] = deque(maxlen=self.limit or None)

    @property
    def enabled(self) -> bool:
        return self.limit > 0 and self.window_seconds > 0

    def _retry_in(self, now: float) -> float:
        if len(self._stamps) < self.limit:
            return 0.0
        return max(0.0, self._stamps[0] + self.window_seconds - now)

    def remaining(self) -> int:
        if not self.enabled:
            return self.limit
        cutoff = self._clock() - self.window_seconds
        return self.limit - sum(1 for stamp in self._stamps if stamp > cutoff)

    def consume(self) -> None:
        if not self.enabled:
            return
        now = self._clock()
        retry_in = self._retry_in(now)
        if retry_in > 0:
            raise RateLimitError(retry_in=retry_in, limit=self.limit, window_seconds=self.window_seconds)
        self._stamps.append(now)


__all__ = ["SlidingWindowRateLimiter"]
