"""
Pokemon API — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() wires settings, storage, service,
       middleware, exception handlers, routes and static files together.
Who:   uvicorn (`uvicorn pokemon_api.main:app`), the `pokemon-api` console
       script (`run()`), and the test suite (`create_app(Settings(...))`).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:   Request ID → Logging → GZip → CORS   │
    │                                                     │
    │  Routes:       /api/pokemons[...]   /   /health     │
    │  Static:       settings.static_root mounted at /    │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Persistence→500    │
    └─────────────────────────────────────────────────────┘

    app.state.settings         → Settings
    app.state.pokemon_store    → PokemonStore(settings.data_file)
    app.state.pokemon_service  → PokemonService(store)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import PurePath
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.types import Scope

from pokemon_api import __version__
from pokemon_api.config import Settings
from pokemon_api.exceptions import (
    NotFoundError,
    PersistenceError,
    PokemonApiError,
    ValidationError,
)
from pokemon_api.middleware.logging import RequestLoggingMiddleware
from pokemon_api.middleware.request_id import RequestIDMiddleware, request_id_var
from pokemon_api.routes import health, pokemons
from pokemon_api.services.pokemon_service import PokemonService
from pokemon_api.storage import PokemonStore

logger = logging.getLogger(__name__)


class PublicStaticFiles(StaticFiles):
    """
    StaticFiles that refuses dotfiles and anything under a dot-directory.

    The static root defaults to the working directory, which also holds
    `.env` and `.git/`; those answer 404 as if they did not exist.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        if any(part.startswith(".") for part in PurePath(path).parts):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger: one stdout handler, timestamped lines.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, report where the collection lives.
    Shutdown: log only. The store opens and closes the file per call.
    """
    settings: Settings = app.state.settings
    store: PokemonStore = app.state.pokemon_store

    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("Pokemon API starting up...")

    if store.exists():
        logger.info("Collection file: %s", store.path.resolve())
    else:
        # Reads degrade to an empty collection; the first write creates it
        logger.warning("Collection file not found: %s", store.path.resolve())

    logger.info("Server is running on http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Pokemon API shutting down...")
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to `{"error": <message>}` responses.

    Handler hierarchy:
        ValidationError         → 400
        RequestValidationError  → 400 (body is not a JSON object)
        NotFoundError           → 404
        PersistenceError        → 500 (operation-specific message)
        PokemonApiError (base)  → 500
        Exception (fallback)    → 500 "Internal server error"

    `context` from application exceptions is logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid request body: %s", rid, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(PersistenceError)
    async def handle_persistence_error(request: Request, exc: PersistenceError):
        rid = request_id_var.get("")
        logger.error("[%s] Persistence error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(PokemonApiError)
    async def handle_app_error(request: Request, exc: PokemonApiError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit configuration (tests pass one pointing at a
                  temporary collection). Built from the environment if None.

    Returns:
        Fully configured FastAPI instance.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Pokemon API",
        description="CRUD API over a JSON-file collection of Pokemon entries.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Storage & Service ─────────────────────────────────────────────────
    store = PokemonStore(settings.data_file)
    app.state.settings = settings
    app.state.pokemon_store = store
    app.state.pokemon_service = PokemonService(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(pokemons.router)
    app.include_router(health.router)

    # Mounted last: API routes and the banner take precedence over files
    app.mount("/", PublicStaticFiles(directory=settings.static_root), name="static")

    return app


def run() -> None:
    """Start the server with uvicorn on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        create_app(settings),
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `pokemon_api.main:app` to be importable
app = create_app()
