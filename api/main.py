# api/main.py

"""
Geckowatch API - FastAPI backend for the mobile app.

This API serves species optimal conditions, classified current conditions
and chart-ready reading history for each enclosure.

Run with: uvicorn api.main:app --reload
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from api.config import get_settings
from api.database import get_database, close_connection
from api.routers import (
    species_router,
    enclosures_router,
    daynight_router
)
from domain.exceptions import (
    EnclosureNotFoundError,
    InvalidRangeError,
    ReadingStoreError,
    UnsupportedWindowError
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    # Startup: verify database connection
    db = get_database()
    try:
        db.command("ping")
        print(f"Connected to MongoDB: {db.name}")
    except PyMongoError as e:
        print(f"Warning: Could not connect to MongoDB: {e}")

    yield

    # Shutdown: close database connection
    close_connection()
    print("Closed MongoDB connection")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain errors onto HTTP responses."""

    @app.exception_handler(EnclosureNotFoundError)
    async def enclosure_not_found(request: Request, exc: EnclosureNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(UnsupportedWindowError)
    async def unsupported_window(request: Request, exc: UnsupportedWindowError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ReadingStoreError)
    async def reading_store_unavailable(request: Request, exc: ReadingStoreError):
        print(f"Reading store error: {exc}")
        return JSONResponse(status_code=503, content={"detail": "Reading store unavailable"})

    @app.exception_handler(InvalidRangeError)
    async def invalid_range(request: Request, exc: InvalidRangeError):
        print(f"Misconfigured species profile: {exc}")
        return JSONResponse(status_code=500, content={"detail": f"Misconfigured species profile: {exc}"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="REST API for reptile habitat condition monitoring",
        lifespan=lifespan
    )

    # Configure CORS for the mobile app
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers with API prefix
    prefix = settings.api_prefix
    app.include_router(species_router, prefix=prefix)
    app.include_router(enclosures_router, prefix=prefix)
    app.include_router(daynight_router, prefix=prefix)

    @app.get("/")
    def root():
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "docs": "/docs",
            "openapi": "/openapi.json"
        }

    @app.get("/health")
    def health():
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
