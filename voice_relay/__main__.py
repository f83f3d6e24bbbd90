"""Run the relay server with uvicorn."""

from __future__ import annotations

import uvicorn

from voice_relay.runtime.settings_loader import load_settings


def main() -> None:
    settings = load_settings()
    uvicorn.run(
        "voice_relay.server:app",
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

__all__ = ["main"]
