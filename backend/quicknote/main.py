"""
QuickNote Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error handling
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       owning its own NoteStore and AI service.
Who:   uvicorn (`uvicorn quicknote.main:app`) or the `quicknote` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────┐ ┌──────────────┐ ┌──────────────┐   │
    │  │ /api/notes │ │ /api/ai/*    │ │ /health      │   │
    │  └────────────┘ └──────────────┘ └──────────────┘   │
    │  Static client mounted at "/"                       │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ AI→500        │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from quicknote import __version__
from quicknote.config import settings
from quicknote.exceptions import (
    AIUnavailableError,
    NotFoundError,
    QuickNoteError,
    ValidationError,
)
from quicknote.middleware.logging import RequestLoggingMiddleware
from quicknote.middleware.request_id import RequestIDMiddleware, request_id_var
from quicknote.routes import ai, health, notes
from quicknote.services.gemini_service import GeminiService
from quicknote.services.llm_base import AIService
from quicknote.services.note_store import NoteStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, configuration check. Shutdown: log how many notes are
    being discarded (they live in memory only).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("QuickNote Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Notes still work without a key; only the AI endpoints fail
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info(
        "QuickNote Backend shutting down, discarding %d in-memory notes",
        len(app.state.note_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the `{"error": ...}` body.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (malformed or wrong-typed body)
        NotFoundError           → 404 Not Found
        AIUnavailableError      → 500 Internal Server Error (generic message)
        QuickNoteError (base)   → 500 Internal Server Error
        HTTPException           → its own status (unknown paths, wrong methods)
        Exception (fallback)    → 500 Internal Server Error

    Context dicts and stack traces are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Malformed request body: %s", request_id_var.get(""), exc.errors())
        return _error(400, "Invalid request body")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.warning("[%s] %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error(404, exc.message)

    @app.exception_handler(AIUnavailableError)
    async def handle_ai_unavailable(request: Request, exc: AIUnavailableError):
        logger.error("[%s] AI service error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(QuickNoteError)
    async def handle_app_error(request: Request, exc: QuickNoteError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error(500, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    ai_service: Optional[AIService] = None,
    note_store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        ai_service: AI proxy to use. Defaults to GeminiService; tests pass a stub.
        note_store: Note store to use. Defaults to a fresh, empty NoteStore.

    Returns:
        Fully configured FastAPI instance. Its note store is created here and
        discarded with the app.
    """
    app = FastAPI(
        title="QuickNote API",
        description="Minimal note-taking service with AI suggestions and corrections.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.note_store = note_store if note_store is not None else NoteStore()
    app.state.ai_service = ai_service if ai_service is not None else GeminiService()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(ai.router)
    app.include_router(health.router)

    # Mounted last: "/" would otherwise shadow the API routes
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


def run() -> None:
    """Entry point for the `quicknote` console script."""
    uvicorn.run(
        "quicknote.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `quicknote.main:app` to be importable
app = create_app()
