"""
HTTP middleware: origin guard and request logging.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

CORS_ERROR_MESSAGE = "CORS error"


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """
    Reject requests whose `Origin` is not the configured one.

    A missing `Origin` header counts as a mismatch unless `allow_no_origin`
    is set (curl, server-to-server, same-origin navigation). Allowed origins
    still get their CORS headers from Starlette's `CORSMiddleware`, which
    must sit inside this one.
    """

    def __init__(self, app: ASGIApp, *, allowed_origin: str, allow_no_origin: bool = False) -> None:
        super().__init__(app)
        self.allowed_origin = allowed_origin.rstrip("/")
        self.allow_no_origin = allow_no_origin

    def is_allowed(self, origin: str | None) -> bool:
        if origin is None:
            return self.allow_no_origin
        return origin.rstrip("/") == self.allowed_origin

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        origin = request.headers.get("origin")
        if not self.is_allowed(origin):
            logger.warning("Rejected request from origin %s: %s %s", origin, request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_403_FORBIDDEN,
                content={"error": CORS_ERROR_MESSAGE},
            )
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception("%s %s failed after %.1f ms", request.method, request.url.path, elapsed_ms)
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s %s %.1f ms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response
