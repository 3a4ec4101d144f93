"""
Pydantic models for the program import API.

Responses wrap the materialized domain models with the summary a client
needs to prompt the coach about exercises that were not linked to the
catalog.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models import MaterializedProgramTemplate


class ProgramImportResponse(BaseModel):
    """Result of importing a generated program."""
    template: MaterializedProgramTemplate
    workout_count: int
    exercise_count: int
    set_count: int
    unmatched_exercises: List[str] = Field(
        default_factory=list,
        description="Names of exercises saved without a catalog link",
    )

    @classmethod
    def from_template(cls, template: MaterializedProgramTemplate) -> "ProgramImportResponse":
        """Build the response from a materialized template."""
        return cls(
            template=template,
            workout_count=template.workout_count,
            exercise_count=template.exercise_count,
            set_count=template.set_count,
            unmatched_exercises=template.unmatched_exercises,
        )


class CandidateResponse(BaseModel):
    """One scored catalog candidate."""
    id: str
    name: str
    equipment: Optional[str] = None
    primary_muscle_group: Optional[str] = None
    target: Optional[str] = None
    score: float


class ResolveResponse(BaseModel):
    """Preview of how a generated exercise resolves against the catalog."""
    exercise_db_id: Optional[str] = Field(None, description="Accepted catalog id, if any")
    exercise_name: Optional[str] = Field(None, description="Accepted catalog name, if any")
    score: float = Field(..., description="Best candidate score")
    threshold: float = Field(..., description="Minimum score for acceptance")
    matched: bool
    candidates: List[CandidateResponse] = Field(default_factory=list)
