"""
FastAPI dependencies for the services.

The services are constructed once by ``create_app`` and stored on
``app.state``; these dependencies only look them up, so route handlers
never build their own collaborators and tests can swap them per app.
"""

from typing import Annotated

from fastapi import Depends, Path, Request

from tsse_api.app.schemas.fields import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN
from tsse_api.app.services.exercise_service import ExerciseService
from tsse_api.app.services.schedule_service import ScheduleService
from tsse_api.app.services.workout_service import WorkoutService


def get_schedule_service(request: Request) -> ScheduleService:
    return request.app.state.schedule_service


def get_workout_service(request: Request) -> WorkoutService:
    return request.app.state.workout_service


def get_exercise_service(request: Request) -> ExerciseService:
    return request.app.state.exercise_service


ScheduleServiceDep = Annotated[ScheduleService, Depends(get_schedule_service)]
WorkoutServiceDep = Annotated[WorkoutService, Depends(get_workout_service)]
ExerciseServiceDep = Annotated[ExerciseService, Depends(get_exercise_service)]

# Ids in the URL may name rows that do not exist (404) but must fit in
# an SQLite integer (400 otherwise).
PathId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]
