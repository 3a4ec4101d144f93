"""
Generated program models.

These models describe the semi-structured program produced by the external
program generator (weeks -> workouts -> exercises). They are the immutable
input to the import pipeline.

Examples:
    >>> exercise = GeneratedExercise(
    ...     name="Bench Press",
    ...     equipment="Barbell",
    ...     target_muscle="Chest",
    ...     sets=4,
    ...     reps="8-12",
    ...     rest_seconds=90,
    ... )
    >>> exercise.reps
    '8-12'
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from domain.models.set_type import SetType


class GeneratedExercise(BaseModel):
    """A single exercise prescription as authored by the generator."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Free-text exercise name")
    equipment: str = Field(default="", description="Free-text equipment, may be empty")
    target_muscle: str = Field(
        default="",
        validation_alias=AliasChoices("target_muscle", "primary_muscle_group"),
        description="Free-text target muscle, may be empty",
    )
    secondary_muscle_group: Optional[str] = None
    large_muscle_group: Optional[str] = None
    notes: Optional[str] = None
    tempo: Optional[str] = None
    rest_seconds: int = Field(default=0, ge=0, description="Rest after each set")
    sets: int = Field(..., ge=1, description="Number of sets")
    reps: str = Field(..., description="Rep scheme token, e.g. '10' or '8-12'")
    set_type: SetType = Field(default=SetType.REGULAR, description="Default set type")

    @field_validator("equipment", "target_muscle", mode="before")
    @classmethod
    def empty_when_missing(cls, v: Any) -> Any:
        """Treat null equipment/muscle as empty text."""
        return "" if v is None else v

    @field_validator("reps", mode="before")
    @classmethod
    def reps_as_token(cls, v: Any) -> Any:
        """Accept integer reps from JSON and keep them as a token."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("set_type", mode="before")
    @classmethod
    def normalize_set_type(cls, v: Any) -> SetType:
        """Map loose generator spellings onto SetType."""
        return SetType.normalize(v)


class GeneratedWorkout(BaseModel):
    """A workout within a generated week."""

    name: str = Field(..., min_length=1)
    day_number: int = Field(..., ge=1, le=7, description="1=Monday, 7=Sunday")
    focus: Optional[str] = None
    notes: Optional[str] = None
    exercises: List[GeneratedExercise] = []


class GeneratedWeek(BaseModel):
    """A week within a generated program."""

    week_number: int = Field(..., ge=1)
    notes: Optional[str] = None
    workouts: List[GeneratedWorkout] = []


class GeneratedProgram(BaseModel):
    """A complete program as returned by the generator."""

    program_name: str = Field(..., min_length=1, max_length=200)
    phase: str = ""
    fitness_level: str = ""
    total_weeks: int = Field(..., ge=1, le=52)
    days_per_week: int = Field(..., ge=1, le=7)
    description: str = ""
    progression_strategy: Optional[str] = None
    deload_strategy: Optional[str] = None
    notes: Optional[str] = None
    weeks: List[GeneratedWeek] = []

    @property
    def exercise_count(self) -> int:
        """Total number of exercises across all weeks and workouts."""
        return sum(
            len(workout.exercises)
            for week in self.weeks
            for workout in week.workouts
        )
