from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

import asyncpg
import uvicorn
from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.middleware.cors import CORSMiddleware

from core import errors, settings
from core.db import Database
from core.logging_config import setup_logging
from core.middleware import OriginGuardMiddleware, RequestLoggingMiddleware
from products import repository as products_repository
from products import router as products_router
from products import validation as products_validation

logger = logging.getLogger(__name__)

# Startup connection failures we log and survive; requests that need the
# store then fail with 500 until the process is restarted.
DB_STARTUP_ERRORS = (
    OSError,
    asyncio.TimeoutError,
    ValueError,
    RuntimeError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
)

DOCS_SITE_TITLE = "Products REST API docs"
SWAGGER_UI_PARAMETERS = {"defaultModelsExpandDepth": 1, "displayRequestDuration": True}

OPENAPI_TAGS = [
    {
        "name": "Products",
        "description": "API operations related to products",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = Database()
    app.state.db = db
    try:
        await db.connect()
        await products_repository.ensure_schema(db)
        logger.info("Connected to the database.")
    except DB_STARTUP_ERRORS as exc:
        logger.error("There was an error connecting to the database: %s", exc)
    try:
        yield
    finally:
        await db.close()


def create_app(*, allowed_origin: str | None = None, allow_no_origin: bool | None = None) -> FastAPI:
    setup_logging(settings.log_level())
    origin = (allowed_origin or settings.frontend_url()).rstrip("/")
    if allow_no_origin is None:
        allow_no_origin = settings.allow_no_origin()

    app = FastAPI(
        title="REST API FastAPI / Python",
        version="1.0.0",
        description="API Docs for Products",
        openapi_tags=OPENAPI_TAGS,
        # Served by `swagger_ui` below so the page gets its own title.
        docs_url=None,
        lifespan=lifespan,
    )

    errors.register_exception_handlers(app, describe_error=products_validation.describe_error)

    # Added innermost first: logging -> origin guard -> CORS -> routes.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(OriginGuardMiddleware, allowed_origin=origin, allow_no_origin=allow_no_origin)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(products_router.router, prefix="/api/products", tags=["Products"])

    @app.get("/docs", include_in_schema=False)
    def swagger_ui():
        return get_swagger_ui_html(
            openapi_url=app.openapi_url,
            title=DOCS_SITE_TITLE,
            swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        )

    @app.get("/health", include_in_schema=False)
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host(), port=settings.port())
