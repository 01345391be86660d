"""FastAPI application factory."""

from fastapi import FastAPI

from routes import health_router, identify_router


def create_app() -> FastAPI:
    """Builds the song-identifier API application."""
    app = FastAPI(title="Song Identifier Service")
    app.include_router(identify_router)
    app.include_router(health_router)
    return app
