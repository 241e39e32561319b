"""
JSON error envelopes.

- HTTP errors (404, 405, ...) -> {"error": "<detail>"}
- request validation errors  -> 400 {"errors": [{"location", "field", "message"}, ...]}
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

ErrorDescriber = Callable[[dict[str, Any]], dict[str, Any]]


def default_describe_error(error: dict[str, Any]) -> dict[str, Any]:
    loc = tuple(error.get("loc") or ())
    return {
        "location": str(loc[0]) if loc else "request",
        "field": str(loc[-1]) if len(loc) > 1 else None,
        "message": str(error.get("msg") or "Invalid value."),
    }


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI, *, describe_error: ErrorDescriber | None = None) -> None:
    describe = describe_error or default_describe_error

    async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [describe(dict(error)) for error in exc.errors()]},
        )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
