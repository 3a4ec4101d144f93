"""
Materialized program models.

Output of the import pipeline: one program template owning workouts, which
own exercise instances, which own individual sets. Records are created once
per import run and never mutated by the pipeline afterwards.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.set_type import SetType


class MaterializedSet(BaseModel):
    """An individual set of an exercise instance."""

    id: Optional[str] = Field(default=None, description="None until persisted")
    set_order: int = Field(..., ge=1)
    type: SetType
    reps: int
    rest_seconds: int = Field(default=0, ge=0)


class MaterializedExerciseInstance(BaseModel):
    """An exercise placed in a workout, optionally linked to the catalog."""

    id: str
    name: str
    exercise_db_id: Optional[str] = Field(
        default=None, description="Catalog exercise id, None when unmatched"
    )
    order_in_workout: int = Field(..., ge=1)
    notes: Optional[str] = None
    tempo: Optional[str] = None
    rest_seconds: int = 0
    sets: int = Field(..., ge=1)
    reps: str
    exercise_sets: List[MaterializedSet] = []

    @property
    def is_matched(self) -> bool:
        """True if the instance is linked to a catalog exercise."""
        return self.exercise_db_id is not None


class MaterializedWorkout(BaseModel):
    """A workout within a materialized program template."""

    id: str
    name: str
    day_number: int = Field(..., ge=1, le=7)
    week_number: int = Field(..., ge=1)
    notes: Optional[str] = None
    exercises: List[MaterializedExerciseInstance] = []


class MaterializedProgramTemplate(BaseModel):
    """Root of a materialized program."""

    id: str
    name: str
    phase: str = ""
    weeks: int = Field(..., ge=1)
    description: str = ""
    fitness_level: str = ""
    owner_id: str
    version: int = 1
    is_latest_version: bool = True
    workouts: List[MaterializedWorkout] = []

    @property
    def workout_count(self) -> int:
        return len(self.workouts)

    @property
    def exercise_count(self) -> int:
        return sum(len(w.exercises) for w in self.workouts)

    @property
    def set_count(self) -> int:
        return sum(
            len(ex.exercise_sets) for w in self.workouts for ex in w.exercises
        )

    @property
    def unmatched_exercises(self) -> List[str]:
        """Names of exercise instances that need to be linked manually."""
        return [
            ex.name
            for w in self.workouts
            for ex in w.exercises
            if not ex.is_matched
        ]
