"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application, sets up logging, CORS
and error rendering, and includes the API router.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn exercise_tracker.app.main:app --reload

The store handle is created here and attached to ``app.state``; pass
your own to ``create_app`` to run against a different store.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from .api.router import router as api_router
from .core.config import settings
from .core.db import get_database_path
from .core.errors import NotFound, register_error_handlers
from .core.logging_config import setup_logging
from .store import ExerciseStore, SQLiteStore


VIEWS_DIR = Path(__file__).resolve().parent / "views"


def create_app(store: Optional[ExerciseStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ExerciseStore]
        Store handle used by every request.  Defaults to a
        ``SQLiteStore`` at the configured ``DATABASE_URL``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else SQLiteStore(get_database_path())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    def index() -> FileResponse:
        index_file = VIEWS_DIR / "index.html"
        if not index_file.exists():
            raise NotFound("index page not found")
        return FileResponse(index_file)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the SQLite file and tables on first start.
        app.state.store.init()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
