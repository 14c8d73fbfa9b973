"""
SQLite repository for schedules.

The ordered ``trainings`` list is kept in ``schedule_trainings`` as
(schedule, position, workout) rows.  Deleting a workout removes it from
every schedule through the foreign key cascade.
"""

import logging
import sqlite3
from collections import defaultdict
from typing import Dict, List, Optional

from tsse_api.app.core.db import Database
from tsse_api.app.schemas.schedule import Schedule

logger = logging.getLogger(__name__)


class ScheduleRepository:
    """Repository for schedule persistence."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_id(self, entity_id: int) -> Optional[Schedule]:
        with self._db.cursor() as cursor:
            row = cursor.execute(
                """
                SELECT id, name, description, amount_of_trainings_per_week
                FROM schedules WHERE id = ?
                """,
                (entity_id,),
            ).fetchone()
            if not row:
                return None
            training_rows = cursor.execute(
                """
                SELECT workout_id FROM schedule_trainings
                WHERE schedule_id = ?
                ORDER BY position
                """,
                (entity_id,),
            ).fetchall()
            return self._row_to_schedule(row, [r["workout_id"] for r in training_rows])

    def find_all(self) -> List[Schedule]:
        with self._db.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT id, name, description, amount_of_trainings_per_week
                FROM schedules ORDER BY id
                """
            ).fetchall()
            training_rows = cursor.execute(
                """
                SELECT schedule_id, workout_id FROM schedule_trainings
                ORDER BY schedule_id, position
                """
            ).fetchall()
        trainings: Dict[int, List[int]] = defaultdict(list)
        for training_row in training_rows:
            trainings[training_row["schedule_id"]].append(training_row["workout_id"])
        return [self._row_to_schedule(row, trainings[row["id"]]) for row in rows]

    def save(self, entity: Schedule) -> Schedule:
        with self._db.cursor() as cursor:
            if entity.id:
                cursor.execute(
                    """
                    INSERT INTO schedules (id, name, description, amount_of_trainings_per_week)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        description = excluded.description,
                        amount_of_trainings_per_week = excluded.amount_of_trainings_per_week,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (entity.id, entity.name, entity.description, entity.amount_of_trainings_per_week),
                )
                schedule_id = entity.id
            else:
                cursor.execute(
                    """
                    INSERT INTO schedules (name, description, amount_of_trainings_per_week)
                    VALUES (?, ?, ?)
                    """,
                    (entity.name, entity.description, entity.amount_of_trainings_per_week),
                )
                schedule_id = cursor.lastrowid
            cursor.execute("DELETE FROM schedule_trainings WHERE schedule_id = ?", (schedule_id,))
            cursor.executemany(
                """
                INSERT INTO schedule_trainings (schedule_id, position, workout_id)
                VALUES (?, ?, ?)
                """,
                [
                    (schedule_id, position, workout_id)
                    for position, workout_id in enumerate(entity.trainings)
                ],
            )
        logger.debug("Saved schedule %s", schedule_id)
        return entity.model_copy(update={"id": schedule_id})

    def delete_by_id(self, entity_id: int) -> None:
        with self._db.cursor() as cursor:
            cursor.execute("DELETE FROM schedules WHERE id = ?", (entity_id,))

    @staticmethod
    def _row_to_schedule(row: sqlite3.Row, trainings: List[int]) -> Schedule:
        return Schedule(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            trainings=trainings,
            amount_of_trainings_per_week=row["amount_of_trainings_per_week"],
        )
