"""
Pydantic model for exercises.

An exercise is always owned by a single workout; it is written through
the workout it belongs to and only read on its own.
"""

from typing import List

from pydantic import BaseModel, Field

from .fields import EntityId


class Exercise(BaseModel):
    """A single exercise inside a workout."""

    id: EntityId = Field(0, examples=[0], description="Server‑assigned identifier, 0 until persisted")
    name: str = Field("", examples=["Squat"])
    description: str = Field("", examples=["5 sets of 5 reps"])


def validate_exercise(exercise: Exercise) -> List[str]:
    """Return the violation messages for ``exercise``; empty when valid."""
    violations: List[str] = []
    if not exercise.name.strip():
        violations.append("Exercise name cannot be empty!")
    return violations
