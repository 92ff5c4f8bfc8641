from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


class APIError(Exception):
    """Raised by route handlers to answer with the `{"error": ...}` envelope."""

    def __init__(self, status_code: int, error: str, details: str | None = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def catch_unhandled_errors(request: Request, call_next):  # type: ignore[no-untyped-def]
    # Registered inside the CORS layer so browsers can read the 500 body.
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s", request.url.path)
        return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(APIError)
    async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
        return error_response(exc.status_code, exc.error, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def malformed_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Only locations and types; the raw input may carry the caller's API key.
        problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
        logger.error("Malformed request to %s: %s", request.url.path, problems)
        return error_response(500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return error_response(500, INTERNAL_ERROR_MESSAGE)
