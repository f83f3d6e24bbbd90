"""Main FastAPI server for the Revolt voice chat relay."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from voice_relay.chat import ChatBackend
from voice_relay.state.settings import AppSettings
from voice_relay.runtime.logging import configure_logging
from voice_relay.config.server import HEALTH_STATUS_HEALTHY
from voice_relay.runtime.settings_loader import load_settings
from voice_relay.runtime.dependencies import build_runtime_deps
from voice_relay.handlers.websocket.manager import handle_websocket_connection
from voice_relay.config.websocket import WS_ENDPOINT_PATH, WS_ALT_ENDPOINT_PATH

logger = logging.getLogger(__name__)


def create_app(
    settings: AppSettings | None = None,
    *,
    chat_backend: ChatBackend | None = None,
) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await build_runtime_deps(settings, chat_backend=chat_backend)
        app.state.runtime_deps = runtime_deps
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, object]:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        active = runtime_deps.sessions.count() if runtime_deps is not None else 0
        return {
            "status": HEALTH_STATUS_HEALTHY,
            "activeSessions": active,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    app.add_api_websocket_route(WS_ENDPOINT_PATH, websocket_endpoint)
    app.add_api_websocket_route(WS_ALT_ENDPOINT_PATH, websocket_endpoint)

    # Mounted last so the routes above win for "/".
    static_dir = settings.server.static_dir
    if static_dir is not None:
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("STATIC_DIR %s is not a directory; frontend not served", static_dir)

    return app


_settings = load_settings()
configure_logging(_settings.logging)
app = create_app(_settings)

__all__ = ["app", "create_app"]
