"""
Bug Tracker Backend — FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn (uvicorn bugtracker.main:app, or the `bugtracker` script).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  GZip/CORS   │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────────┐ ┌─────────────────┐ │
    │  │ POST/GET/PUT/DELETE bugs   │ │ GET /health     │ │
    │  └────────────────────────────┘ └─────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ anything→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, open the store handle (once per process)
    Shutdown: close the store handle
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from bugtracker import __version__
from bugtracker.config import settings
from bugtracker.exceptions import (
    GENERIC_ERROR_MESSAGE,
    BugTrackerError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bugtracker.middleware.logging import RequestLoggingMiddleware
from bugtracker.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from bugtracker.routes import bugs, health
from bugtracker.store import BugStore, create_store

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before the store is opened.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Per-request noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

def build_lifespan(store: Optional[BugStore] = None):
    """
    Return the lifespan context manager for create_app().

    Args:
        store: A ready-made store to serve instead of building one from
               settings (the caller keeps ownership; it is not closed here).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ── Startup ───────────────────────────────────────────────────────
        setup_logging()
        logger.info("Bug Tracker backend %s starting up...", __version__)

        owned = store is None
        app.state.store = await create_store(settings) if owned else store

        logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

        yield  # Application runs here

        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("Bug Tracker backend shutting down...")
        if owned:
            await app.state.store.close()
        logger.info("Shutdown complete.")

    return lifespan


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "") or request_id_var.get("")


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Build the {"error": ..., "request_id": ...} body every handler returns."""
    rid = _request_id(request)
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "request_id": rid},
        headers={REQUEST_ID_HEADER: rid} if rid else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400 Bad Request
        NotFoundError                            → 404 Not Found
        DatabaseError                            → 500 "Something went wrong"
        BugTrackerError (base)                   → 500 "Something went wrong"
        Exception (fallback)                     → 500 "Something went wrong"

    Underlying messages are logged server-side, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return error_response(request, 400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """FastAPI could not parse the body into BugCreate/BugUpdate."""
        logger.warning("[%s] Invalid request body: %s", _request_id(request), exc.errors())
        return error_response(request, 400, ValidationError().message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(request, 404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("[%s] Database error: %s | Context: %s", _request_id(request), exc.message, exc.context)
        return error_response(request, 500, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(BugTrackerError)
    async def handle_app_error(request: Request, exc: BugTrackerError):
        logger.error("[%s] Application error: %s | Context: %s", _request_id(request), exc.message, exc.context)
        return error_response(request, 500, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all; the stack trace goes to the log only."""
        logger.error("[%s] Unexpected error: %s", _request_id(request), str(exc), exc_info=True)
        return error_response(request, 500, GENERIC_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[BugStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Optional store to serve; by default one is built from settings
               at startup.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Bug Tracker API",
        description="Create, list, update and delete bug records.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=build_lifespan(store),
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → routes

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )

    # The list endpoint is unpaginated; compress large arrays
    app.add_middleware(GZipMiddleware, minimum_size=500)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(bugs.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    import uvicorn

    uvicorn.run(
        "bugtracker.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `bugtracker.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
