"""
Catalog exercise models.

A CatalogExercise is a canonical, pre-existing exercise definition from the
reference catalog. It is read-only to the import pipeline.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CatalogExercise(BaseModel):
    """Canonical exercise record from the exercises table."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    equipment: Optional[str] = None
    primary_muscle_group: Optional[str] = None
    target: Optional[str] = None
    original_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "CatalogExercise":
        """Build from a database row, tolerating extra columns and numeric ids."""
        return cls.model_validate({**row, "id": str(row["id"])})


class MatchCandidate(BaseModel):
    """A catalog exercise with the score it earned during one resolution."""

    exercise: CatalogExercise
    score: float = Field(..., ge=0)
