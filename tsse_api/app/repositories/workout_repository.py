"""
SQLite repository for workouts and their exercises.

Exercises are stored in their own table with the owning workout id and
their position in the workout.  Saving a workout rewrites its exercise
rows inside the same transaction.  An exercise keeps its id only when
that id already belonged to the workout being saved; every other
exercise receives a new id, so one exercise can never end up in two
workouts.  When the same id is sent twice, only the first copy keeps it.
"""

import logging
import sqlite3
from collections import defaultdict
from typing import Dict, List, Optional

from tsse_api.app.core.db import Database
from tsse_api.app.schemas.exercise import Exercise
from tsse_api.app.schemas.workout import Workout

logger = logging.getLogger(__name__)


class WorkoutRepository:
    """Repository for workout persistence."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_id(self, entity_id: int) -> Optional[Workout]:
        with self._db.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, description FROM workouts WHERE id = ?",
                (entity_id,),
            ).fetchone()
            if not row:
                return None
            exercise_rows = cursor.execute(
                """
                SELECT id, name, description FROM exercises
                WHERE workout_id = ?
                ORDER BY position
                """,
                (entity_id,),
            ).fetchall()
            return self._row_to_workout(row, [self._row_to_exercise(r) for r in exercise_rows])

    def find_all(self) -> List[Workout]:
        with self._db.cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, name, description FROM workouts ORDER BY id"
            ).fetchall()
            exercise_rows = cursor.execute(
                """
                SELECT id, workout_id, name, description FROM exercises
                ORDER BY workout_id, position
                """
            ).fetchall()
        by_workout: Dict[int, List[Exercise]] = defaultdict(list)
        for exercise_row in exercise_rows:
            by_workout[exercise_row["workout_id"]].append(self._row_to_exercise(exercise_row))
        return [self._row_to_workout(row, by_workout[row["id"]]) for row in rows]

    def save(self, entity: Workout) -> Workout:
        with self._db.cursor() as cursor:
            if entity.id:
                cursor.execute(
                    """
                    INSERT INTO workouts (id, name, description) VALUES (?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        description = excluded.description,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (entity.id, entity.name, entity.description),
                )
                workout_id = entity.id
            else:
                cursor.execute(
                    "INSERT INTO workouts (name, description) VALUES (?, ?)",
                    (entity.name, entity.description),
                )
                workout_id = cursor.lastrowid
            exercises = self._replace_exercises(cursor, workout_id, entity.exercises)
        logger.debug("Saved workout %s with %d exercises", workout_id, len(exercises))
        return entity.model_copy(update={"id": workout_id, "exercises": exercises})

    def delete_by_id(self, entity_id: int) -> None:
        # Exercises and schedule references are removed by ON DELETE CASCADE.
        with self._db.cursor() as cursor:
            cursor.execute("DELETE FROM workouts WHERE id = ?", (entity_id,))

    @staticmethod
    def _replace_exercises(
        cursor: sqlite3.Cursor, workout_id: int, exercises: List[Exercise]
    ) -> List[Exercise]:
        owned_ids = {
            row["id"]
            for row in cursor.execute(
                "SELECT id FROM exercises WHERE workout_id = ?", (workout_id,)
            ).fetchall()
        }
        cursor.execute("DELETE FROM exercises WHERE workout_id = ?", (workout_id,))
        saved: List[Exercise] = []
        for position, exercise in enumerate(exercises):
            if exercise.id and exercise.id in owned_ids:
                cursor.execute(
                    """
                    INSERT INTO exercises (id, workout_id, position, name, description)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (exercise.id, workout_id, position, exercise.name, exercise.description),
                )
                exercise_id = exercise.id
                # A repeated id only keeps it for its first occurrence.
                owned_ids.discard(exercise_id)
            else:
                cursor.execute(
                    """
                    INSERT INTO exercises (workout_id, position, name, description)
                    VALUES (?, ?, ?, ?)
                    """,
                    (workout_id, position, exercise.name, exercise.description),
                )
                exercise_id = cursor.lastrowid
            saved.append(exercise.model_copy(update={"id": exercise_id}))
        return saved

    @staticmethod
    def _row_to_exercise(row: sqlite3.Row) -> Exercise:
        return Exercise(id=row["id"], name=row["name"], description=row["description"])

    @staticmethod
    def _row_to_workout(row: sqlite3.Row, exercises: List[Exercise]) -> Workout:
        return Workout(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            exercises=exercises,
        )
