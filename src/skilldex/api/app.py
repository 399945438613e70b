"""FastAPI application factory."""

from fastapi import FastAPI

from skilldex import __version__
from skilldex.api.routers import skills
from skilldex.core.context import SharedContext


def create_app(context: SharedContext) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Skilldex API",
        description="Read-only HTTP API over a skill registry",
        version=__version__,
    )
    app.state.context = context

    app.include_router(skills.router, prefix="/skills", tags=["skills"])

    return app
