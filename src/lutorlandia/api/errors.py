"""Exception handlers that give every failure the ``{"error": ...}`` shape."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from lutorlandia.domain import InvalidTransitionError, MissingParentError

logger = logging.getLogger(__name__)


async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.info("rejected %s %s: %d validation errors", request.method, request.url.path, len(details))
    return JSONResponse(
        {"error": "Invalid request", "details": details},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def transition_error(request: Request, exc: InvalidTransitionError) -> JSONResponse:
    logger.info("refused transition: %s", exc)
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_409_CONFLICT)


async def missing_parent_error(request: Request, exc: MissingParentError) -> JSONResponse:
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log each request and turn anything unhandled into a JSON 500."""

    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(
            {"error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def install_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error)
    app.add_exception_handler(RequestValidationError, validation_error)
    app.add_exception_handler(InvalidTransitionError, transition_error)
    app.add_exception_handler(MissingParentError, missing_parent_error)
    app.middleware("http")(log_requests)
