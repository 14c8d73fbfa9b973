"""
Top‑level API router.

Aggregates the domain routers under one prefix (``/api`` by default).
Every route included here requires HTTP Basic authentication.
"""

from fastapi import APIRouter, Depends

from tsse_api.app.core.security import USER_ROLE, require_roles

from .endpoints import exercises, schedules, workouts

router = APIRouter(dependencies=[Depends(require_roles(USER_ROLE))])

router.include_router(schedules.router, prefix="/schedule", tags=["schedule"])
router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
