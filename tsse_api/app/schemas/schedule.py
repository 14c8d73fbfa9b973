"""
Pydantic model for training schedules.

A schedule references workouts by id in ``trainings`` and states how
many trainings are planned per week.  On the wire the latter is called
``amountOfTrainingsPerWeek``; both the alias and the attribute name are
accepted on input, responses always use the alias.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .fields import EntityId, StoredInt


class Schedule(BaseModel):
    """A training schedule."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(0, examples=[0], description="Server‑assigned identifier, 0 until persisted")
    name: str = Field("", examples=["Beginner plan"])
    description: str = Field("", examples=["Three full body sessions"])
    trainings: List[EntityId] = Field(
        default_factory=list,
        description="Ordered ids of the workouts trained in this schedule",
    )
    amount_of_trainings_per_week: StoredInt = Field(0, alias="amountOfTrainingsPerWeek", examples=[3])


def validate_schedule(schedule: Schedule) -> List[str]:
    """Return the violation messages for ``schedule``; empty when valid.

    The description may be empty.
    """
    violations: List[str] = []
    if not schedule.name.strip():
        violations.append("Schedule name cannot be empty!")
    if schedule.amount_of_trainings_per_week < 1:
        violations.append("Schedule needs at least one training per week!")
    return violations
