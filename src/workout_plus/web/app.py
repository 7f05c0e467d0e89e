"""FastAPI application for the workout-plus JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, get_settings
from ..data import load_catalog, seed_exercises
from ..db import Database, init_db
from ..errors import (
    InvalidReferenceError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .routers import exercises, programs, workouts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    settings: Settings = app.state.settings

    # Startup: open the storage handle, ensure schema and catalog
    database = Database(settings.database_path)
    await database.open()
    try:
        await init_db(database)
        if settings.seed_on_startup:
            await seed_exercises(database, load_catalog(settings.catalog_file))
        app.state.database = database
        yield
    finally:
        # Shutdown: release the connection
        await database.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="workout-plus",
        description="Workout training program management API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    _register_error_handlers(app)

    app.include_router(programs.router)
    app.include_router(workouts.router)
    app.include_router(workouts.assignments_router)
    app.include_router(exercises.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "environment": settings.environment,
        }

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_error_handlers(app: FastAPI) -> None:
    """Map application errors to distinct HTTP outcomes."""

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return _error(422, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'][1:]) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        return _error(422, problems or "Invalid request")

    @app.exception_handler(InvalidReferenceError)
    async def invalid_reference(request: Request, exc: InvalidReferenceError):
        return _error(404, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(StorageError)
    async def storage_error(request: Request, exc: StorageError):
        logger.error(
            "%s %s failed", request.method, request.url.path, exc_info=exc
        )
        return _error(500, "Operation failed")
