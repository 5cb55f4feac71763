"""
svckit: FastAPI Application Factory
======================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the services, seeds the catalog, builds the
       dispatch table, and registers middleware, exception handlers and
       routes.
Who:   Called by uvicorn (uvicorn svckit.main:app) and by the tests.
When:  Once per application instance; the returned app serves all requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging                  │
    │                                                     │
    │  Dispatch table (POST):                             │
    │    /uppercase /count /books /book /setbook          │
    │      └─ HTTPServer → Endpoint → Service             │
    │                                                     │
    │  GET /health                                        │
    │                                                     │
    │  Exception Handlers:                                │
    │    MalformedRequestError→400 │ SvcKitError→500      │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from svckit import __version__
from svckit.config import Settings, settings as default_settings
from svckit.exceptions import MalformedRequestError, SvcKitError
from svckit.middleware.logging import RequestLoggingMiddleware
from svckit.middleware.request_id import RequestIDMiddleware, request_id_var
from svckit.routes import health
from svckit.routes.dispatch import build_dispatch_table, mount_dispatch_table
from svckit.services.book_service import Catalog, InMemoryCatalogService
from svckit.services.string_service import BasicStringService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # svckit.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(app_settings.log_level)
    logger.info("svckit %s starting up...", __version__)
    logger.info("Catalog holds %d books", len(app.state.catalog))
    logger.info(
        "Server ready at http://%s:%d",
        app_settings.backend_host,
        app_settings.backend_port,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("svckit shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        MalformedRequestError → 400 Bad Request (body could not be decoded)
        SvcKitError (base)    → 500 Internal Server Error
        Exception (fallback)  → 500 Internal Server Error

    Domain errors (EmptyInputError, NotFoundError) never reach these
    handlers; endpoints return them inside the response body.
    """

    @app.exception_handler(MalformedRequestError)
    async def handle_malformed_request(request: Request, exc: MalformedRequestError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request to %s: %s", rid, request.url.path, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "malformed_request",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(SvcKitError)
    async def handle_svckit_error(request: Request, exc: SvcKitError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled service error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace is logged server-side only, never returned."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build with; defaults to the module-level
                      singleton loaded from the environment.

    Returns:
        A FastAPI instance with its own catalog. Two apps built by two
        calls never share catalog state.
    """
    if app_settings is None:
        app_settings = default_settings

    app = FastAPI(
        title="svckit API",
        description="String operations and a book catalog as JSON-over-HTTP RPC.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Services ──────────────────────────────────────────────────────────
    catalog = Catalog()
    if app_settings.seed_catalog:
        catalog.seed()

    string_service = BasicStringService()
    catalog_service = InMemoryCatalogService(
        catalog, strict_lookup=app_settings.strict_book_lookup
    )

    app.state.settings = app_settings
    app.state.catalog = catalog
    app.state.catalog_service = catalog_service

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    table = build_dispatch_table(string_service, catalog_service)
    mount_dispatch_table(app, table)
    app.state.dispatch_table = table
    app.include_router(health.router)

    return app


# uvicorn expects `svckit.main:app` to be importable
app = create_app()
