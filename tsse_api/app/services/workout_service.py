"""
Business logic for workouts.

Duplicates are detected purely by id: two workouts with the same name
and description but different ids are distinct.  Deleting is
idempotent, so removing an unknown id succeeds.
"""

import logging
from typing import List

from tsse_api.app.repositories.base import Repository
from tsse_api.app.schemas.workout import Workout
from tsse_api.app.services.result import ServiceResult, already_exists, not_found

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for managing workouts."""

    def __init__(self, repository: Repository[Workout]) -> None:
        self._repository = repository

    def create(self, workout: Workout) -> ServiceResult[Workout]:
        """Persist a new workout unless one with the same id already exists."""
        if self._repository.find_by_id(workout.id) is not None:
            logger.warning("Workout %s already exists", workout.id)
            return ServiceResult.failure(already_exists("Workout", workout.id))
        saved = self._repository.save(workout)
        logger.info("Created workout %s '%s'", saved.id, saved.name)
        return ServiceResult.success(saved)

    def get_by_id(self, workout_id: int) -> ServiceResult[Workout]:
        workout = self._repository.find_by_id(workout_id)
        if workout is None:
            return ServiceResult.failure(not_found("Workout", workout_id))
        return ServiceResult.success(workout)

    def get_all(self) -> ServiceResult[List[Workout]]:
        return ServiceResult.success(self._repository.find_all())

    def update(self, workout: Workout) -> ServiceResult[Workout]:
        """Replace an existing workout; unknown ids are not created."""
        if self._repository.find_by_id(workout.id) is None:
            logger.warning("Cannot update missing workout %s", workout.id)
            return ServiceResult.failure(not_found("Workout", workout.id))
        saved = self._repository.save(workout)
        logger.info("Updated workout %s", saved.id)
        return ServiceResult.success(saved)

    def delete_by_id(self, workout_id: int) -> ServiceResult[None]:
        self._repository.delete_by_id(workout_id)
        logger.info("Deleted workout %s", workout_id)
        return ServiceResult.success()
