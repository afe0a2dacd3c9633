"""FastAPI application for the lift-log web interface."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from .. import __version__
from ..db import LocalStorage, ProgramRepository, get_db_path, init_db
from ..services.tracker import Tracker
from .routers import programs, settings, workouts


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: initialize the database and load state once for the session
    db_path = app.state.db_path
    storage = LocalStorage(db_path)
    if not db_path.exists():
        await init_db(db_path)
        await ProgramRepository(storage).seed()
    app.state.tracker = await Tracker.load(storage)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="lift-log",
        description="Personal Workout Log",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path or get_db_path()

    app.include_router(workouts.router)
    app.include_router(workouts.history_router)
    app.include_router(programs.router)
    app.include_router(settings.router)

    @app.get("/")
    async def root(request: Request):
        """Root redirect to the history view."""
        return RedirectResponse(url="/history", status_code=302)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
