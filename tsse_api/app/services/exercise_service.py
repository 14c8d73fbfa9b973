"""
Read access to exercises across all workouts.
"""

from typing import List

from tsse_api.app.repositories.exercise_repository import ExerciseRepository
from tsse_api.app.schemas.exercise import Exercise
from tsse_api.app.services.result import ServiceResult, not_found


class ExerciseService:
    """Service for looking up exercises."""

    def __init__(self, repository: ExerciseRepository) -> None:
        self._repository = repository

    def get_by_id(self, exercise_id: int) -> ServiceResult[Exercise]:
        exercise = self._repository.find_by_id(exercise_id)
        if exercise is None:
            return ServiceResult.failure(not_found("Exercise", exercise_id))
        return ServiceResult.success(exercise)

    def get_by_name(self, name: str) -> ServiceResult[List[Exercise]]:
        """Return the exercises called ``name``; not found when there are none."""
        exercises = self._repository.find_by_name(name)
        if not exercises:
            return ServiceResult.failure(not_found("Exercise", name, field_name="name"))
        return ServiceResult.success(exercises)

    def get_all(self) -> ServiceResult[List[Exercise]]:
        return ServiceResult.success(self._repository.find_all())
