"""
Exercise endpoints.

Exercises are owned by workouts and changed through ``/workouts``;
these routes only read them.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from tsse_api.app.api.deps import ExerciseServiceDep, PathId
from tsse_api.app.api.errors import respond
from tsse_api.app.schemas.exercise import Exercise

router = APIRouter()


@router.get("", response_model=List[Exercise])
def list_exercises(
    service: ExerciseServiceDep,
    name: Optional[str] = Query(None, description="Only exercises with this name"),
):
    """Return all exercises, or those called ``name`` (404 if none is)."""
    if name is not None:
        return respond(service.get_by_name(name))
    return respond(service.get_all())


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(exercise_id: PathId, service: ExerciseServiceDep):
    return respond(service.get_by_id(exercise_id))
