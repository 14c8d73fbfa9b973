"""
Main entrypoint for the TSSE training API.

This module assembles the FastAPI application.  ``create_app`` builds
every collaborator exactly once, in dependency order: the ``Database``,
one repository per table, one service per domain.  They are stored on
``app.state`` and looked up by the dependencies in ``api.deps``.  The
module‑level ``app`` uses the environment driven settings, so the API
can be served with::

    uvicorn tsse_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import health
from .api.errors import register_exception_handlers
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import Database, resolve_database_path
from .core.logging_config import setup_logging
from .repositories.exercise_repository import ExerciseRepository
from .repositories.schedule_repository import ScheduleRepository
from .repositories.workout_repository import WorkoutRepository
from .services.exercise_service import ExerciseService
from .services.schedule_service import ScheduleService
from .services.workout_service import WorkoutService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured application.  Migrations are applied when the
        application starts up.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings)

    database = Database(resolve_database_path(settings.database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.init()
        logger.info("%s %s started, database at %s", settings.project_name, settings.api_version, database.path)
        yield
        logger.info("%s shutting down", settings.project_name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    workout_repository = WorkoutRepository(database)
    app.state.settings = settings
    app.state.database = database
    app.state.workout_service = WorkoutService(workout_repository)
    app.state.schedule_service = ScheduleService(ScheduleRepository(database), workout_repository)
    app.state.exercise_service = ExerciseService(ExerciseRepository(database))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
