"""
Business logic for schedules.

Besides the id based existence rules shared with workouts, a schedule
may only reference workouts that exist.  The first missing workout in
``trainings`` is reported as not found and nothing is written.
"""

import logging
from typing import List, Optional

from tsse_api.app.repositories.base import Repository
from tsse_api.app.schemas.schedule import Schedule
from tsse_api.app.schemas.workout import Workout
from tsse_api.app.services.result import (
    ServiceError,
    ServiceResult,
    already_exists,
    not_found,
)

logger = logging.getLogger(__name__)


class ScheduleService:
    """Service for managing training schedules."""

    def __init__(
        self,
        repository: Repository[Schedule],
        workout_repository: Repository[Workout],
    ) -> None:
        self._repository = repository
        self._workouts = workout_repository

    def create(self, schedule: Schedule) -> ServiceResult[Schedule]:
        """Persist a new schedule unless one with the same id already exists."""
        if self._repository.find_by_id(schedule.id) is not None:
            logger.warning("Schedule %s already exists", schedule.id)
            return ServiceResult.failure(already_exists("Schedule", schedule.id))
        missing = self._missing_training(schedule)
        if missing is not None:
            return ServiceResult.failure(missing)
        saved = self._repository.save(schedule)
        logger.info("Created schedule %s '%s'", saved.id, saved.name)
        return ServiceResult.success(saved)

    def get_by_id(self, schedule_id: int) -> ServiceResult[Schedule]:
        schedule = self._repository.find_by_id(schedule_id)
        if schedule is None:
            return ServiceResult.failure(not_found("Schedule", schedule_id))
        return ServiceResult.success(schedule)

    def get_all(self) -> ServiceResult[List[Schedule]]:
        return ServiceResult.success(self._repository.find_all())

    def update(self, schedule: Schedule) -> ServiceResult[Schedule]:
        """Replace an existing schedule; unknown ids are not created."""
        if self._repository.find_by_id(schedule.id) is None:
            logger.warning("Cannot update missing schedule %s", schedule.id)
            return ServiceResult.failure(not_found("Schedule", schedule.id))
        missing = self._missing_training(schedule)
        if missing is not None:
            return ServiceResult.failure(missing)
        saved = self._repository.save(schedule)
        logger.info("Updated schedule %s", saved.id)
        return ServiceResult.success(saved)

    def delete_by_id(self, schedule_id: int) -> ServiceResult[None]:
        self._repository.delete_by_id(schedule_id)
        logger.info("Deleted schedule %s", schedule_id)
        return ServiceResult.success()

    def _missing_training(self, schedule: Schedule) -> Optional[ServiceError]:
        for workout_id in dict.fromkeys(schedule.trainings):
            if self._workouts.find_by_id(workout_id) is None:
                logger.warning(
                    "Schedule %s references missing workout %s", schedule.id, workout_id
                )
                return not_found("Workout", workout_id)
        return None
