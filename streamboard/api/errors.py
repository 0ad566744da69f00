"""JSON error rendering."""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render ``HTTPException`` as ``{"error": detail}``.

    A mapping detail is returned as the body unchanged.
    """

    detail = exc.detail
    content = dict(detail) if isinstance(detail, Mapping) else {"error": detail}
    return JSONResponse(
        content, status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Unparseable requests, such as malformed JSON, are client errors."""

    errors = exc.errors()
    message = errors[0].get("msg") if errors else None
    return JSONResponse({"error": message or "Invalid request"}, status_code=400)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


__all__ = [
    "http_exception_handler",
    "register_error_handlers",
    "validation_exception_handler",
]
