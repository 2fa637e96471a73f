"""FastAPI application wiring for Lutorlandia."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from lutorlandia import __version__
from lutorlandia.api import auth, bugs, content, routes, rules, tournaments
from lutorlandia.api.errors import install_error_handling
from lutorlandia.api.runtime import ApiState, build_state
from lutorlandia.config import Settings, get_settings

logger = logging.getLogger(__name__)

SESSION_COOKIE = "lutorlandia_session"


def session_signing_key(settings: Settings) -> str:
    """Return the configured cookie key, or a random one for this process."""

    if settings.session_secret:
        return settings.session_secret
    logger.warning(
        "session_secret not set; signing sessions with a random key, "
        "operators will be logged out on restart"
    )
    return secrets.token_urlsafe(32)


def create_app(
    *,
    state_factory: Callable[[], ApiState] = build_state,
    settings: Settings | None = None,
) -> FastAPI:
    """Instantiate the FastAPI application with routing and lifecycle hooks."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        state = state_factory()
        app.state.api_state = state
        try:
            yield
        finally:
            await state.shutdown()

    app = FastAPI(title="Lutorlandia API", version=__version__, lifespan=lifespan)
    settings = settings or get_settings()
    install_error_handling(app)
    app.add_middleware(
        SessionMiddleware,
        secret_key=session_signing_key(settings),
        session_cookie=SESSION_COOKIE,
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.session_https_only,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(routes.router)
    for module in (auth, content, rules, bugs, tournaments):
        app.include_router(module.router, prefix="/api")
    return app


app = create_app()
