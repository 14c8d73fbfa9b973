"""
Workout endpoints.

CRUD operations for workouts and their exercises.  A workout is always
sent and returned as a whole, exercise list included.
"""

from typing import List

from fastapi import APIRouter, Response, status

from tsse_api.app.api.deps import PathId, WorkoutServiceDep
from tsse_api.app.api.errors import reject, respond
from tsse_api.app.schemas.workout import Workout, validate_workout

router = APIRouter()


@router.post("", response_model=Workout, status_code=status.HTTP_201_CREATED)
def create_workout(workout: Workout, service: WorkoutServiceDep):
    violations = validate_workout(workout)
    if violations:
        return reject(violations)
    return respond(service.create(workout))


@router.get("", response_model=List[Workout])
def list_workouts(service: WorkoutServiceDep):
    return respond(service.get_all())


@router.get("/{workout_id}", response_model=Workout)
def get_workout(workout_id: PathId, service: WorkoutServiceDep):
    return respond(service.get_by_id(workout_id))


@router.put("", response_model=Workout)
def update_workout(workout: Workout, service: WorkoutServiceDep):
    violations = validate_workout(workout)
    if violations:
        return reject(violations)
    return respond(service.update(workout))


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_workout(workout_id: PathId, service: WorkoutServiceDep):
    """Delete a workout, its exercises and its schedule references."""
    result = service.delete_by_id(workout_id)
    if not result.ok:
        return respond(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
