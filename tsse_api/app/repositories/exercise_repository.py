"""
Read‑only SQLite repository for exercises.

Exercises are written through ``WorkoutRepository``; this repository
only looks them up across all workouts.
"""

import sqlite3
from typing import List, Optional

from tsse_api.app.core.db import Database
from tsse_api.app.schemas.exercise import Exercise


class ExerciseRepository:
    """Lookups over the exercises of every workout."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_id(self, entity_id: int) -> Optional[Exercise]:
        with self._db.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, description FROM exercises WHERE id = ?",
                (entity_id,),
            ).fetchone()
        return self._row_to_exercise(row) if row else None

    def find_all(self) -> List[Exercise]:
        with self._db.cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, name, description FROM exercises ORDER BY id"
            ).fetchall()
        return [self._row_to_exercise(row) for row in rows]

    def find_by_name(self, name: str) -> List[Exercise]:
        """Return every exercise called ``name`` (case insensitive), by id."""
        with self._db.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT id, name, description FROM exercises
                WHERE name = ? COLLATE NOCASE
                ORDER BY id
                """,
                (name,),
            ).fetchall()
        return [self._row_to_exercise(row) for row in rows]

    @staticmethod
    def _row_to_exercise(row: sqlite3.Row) -> Exercise:
        return Exercise(id=row["id"], name=row["name"], description=row["description"])
