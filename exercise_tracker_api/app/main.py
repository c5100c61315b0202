"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application, sets up logging, CORS
and the record store, and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload

or through ``run.py`` at the project root.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .store import close_store, get_store


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index() -> Dict[str, Any]:
        return {"name": settings.project_name, "version": settings.api_version}

    @app.on_event("startup")
    async def startup_event() -> None:
        # Opens the database and applies migrations for the SQLite store.
        store = get_store()
        store.init()
        logger.info("%s %s ready", settings.project_name, settings.api_version)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_store()

    return app


# Instantiate the application at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
