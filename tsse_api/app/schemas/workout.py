"""
Pydantic model for workouts.

A workout owns an ordered list of exercises.  Updating a workout
replaces the whole record, exercise list included.
"""

from typing import List

from pydantic import BaseModel, Field

from .exercise import Exercise, validate_exercise
from .fields import EntityId


class Workout(BaseModel):
    """A workout and the exercises it is made of."""

    id: EntityId = Field(0, examples=[0], description="Server‑assigned identifier, 0 until persisted")
    name: str = Field("", examples=["Leg day"])
    description: str = Field("", examples=["Lower body strength"])
    exercises: List[Exercise] = Field(default_factory=list)


def validate_workout(workout: Workout) -> List[str]:
    """Return the violation messages for ``workout`` and its exercises."""
    violations: List[str] = []
    if not workout.name.strip():
        violations.append("Workout name cannot be empty!")
    for exercise in workout.exercises:
        violations.extend(validate_exercise(exercise))
    return violations
