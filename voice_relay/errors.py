"""Shared error types for the voice relay server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float


@dataclass(frozen=True, slots=True)
class ChatBackendError(Exception):
    """Raised when the external chat API fails to open a chat or answer a turn."""

    operation: str
    detail: str

    def __str__(self) -> str:
        return f"{self.operation} failed: {self.detail}"


__all__ = ["ChatBackendError", "RateLimitError"]
