"""
Domain layer for the Program Import API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    CatalogExercise,
    GeneratedExercise,
    GeneratedProgram,
    MaterializedProgramTemplate,
    SetType,
)

__all__ = [
    "CatalogExercise",
    "GeneratedExercise",
    "GeneratedProgram",
    "MaterializedProgramTemplate",
    "SetType",
]
