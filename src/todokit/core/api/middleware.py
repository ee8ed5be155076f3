"""FastAPI error handlers and request logging middleware."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from ulid import ULID

from todokit.core.exceptions import TodoError
from todokit.core.logging import add_request_context, get_logger, reset_request_context

logger = get_logger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def todo_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render domain errors as {error} with their status code."""
    assert isinstance(exc, TodoError)
    if exc.status_code >= 500:
        logger.error(
            "request.store_error",
            path=request.url.path,
            method=request.method,
            error=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render malformed request bodies as 400 instead of FastAPI's 422."""
    assert isinstance(exc, RequestValidationError)
    logger.info("request.invalid_body", path=request.url.path, errors=len(exc.errors()))
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Render framework HTTP errors (unknown route, wrong method) as {error}."""
    assert isinstance(exc, StarletteHTTPException)
    if exc.status_code in (status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED):
        return Response(status_code=exc.status_code, headers=exc.headers)
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch database errors that escaped the manager layer."""
    logger.error("request.database_error", path=request.url.path, method=request.method, error=repr(exc))
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any unexpected failure as a generic 500 {error} body."""
    logger.error("request.unhandled_error", path=request.url.path, method=request.method, exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def add_error_handlers(app: FastAPI) -> None:
    """Register the JSON {error} exception handlers on the app."""
    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind a request id to log context and log request start and completion."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = str(ULID())
        reset_request_context()
        add_request_context(request_id=request_id, method=request.method, path=request.url.path)

        start = time.perf_counter()
        logger.info("http.request.start")
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("http.request.failed", duration_ms=round((time.perf_counter() - start) * 1000, 2))
            raise

        logger.info(
            "http.request.complete",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        response.headers["X-Request-ID"] = request_id
        reset_request_context()
        return response


def add_logging_middleware(app: FastAPI) -> None:
    """Install request logging middleware."""
    app.add_middleware(RequestLoggingMiddleware)
