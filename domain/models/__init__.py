"""
Domain models for the Program Import API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- GeneratedProgram: The semi-structured program produced by the generator
- CatalogExercise: A canonical exercise from the reference catalog
- MaterializedProgramTemplate: The normalized, persisted program tree
- SetType: Semantics of an individual set

Usage:
    >>> from domain.models import GeneratedProgram

    >>> program = GeneratedProgram.model_validate(generator_json)
    >>> program.exercise_count
    42
"""

from domain.models.catalog_exercise import CatalogExercise, MatchCandidate
from domain.models.generated_program import (
    GeneratedExercise,
    GeneratedProgram,
    GeneratedWeek,
    GeneratedWorkout,
)
from domain.models.materialized import (
    MaterializedExerciseInstance,
    MaterializedProgramTemplate,
    MaterializedSet,
    MaterializedWorkout,
)
from domain.models.set_type import SetType

__all__ = [
    # Input
    "GeneratedProgram",
    "GeneratedWeek",
    "GeneratedWorkout",
    "GeneratedExercise",
    # Catalog
    "CatalogExercise",
    "MatchCandidate",
    # Output
    "MaterializedProgramTemplate",
    "MaterializedWorkout",
    "MaterializedExerciseInstance",
    "MaterializedSet",
    # Enums
    "SetType",
]
