"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure simulation for error-path tests
- Builders for generated program payloads

Usage:
    from tests.fakes import FakeExerciseCatalogRepository, FakeProgramTemplateRepository

    catalog = FakeExerciseCatalogRepository()
    repo = FakeProgramTemplateRepository()
    repo.simulate_failure("exercise_instance", after=2)
"""

from tests.fakes.exercise_catalog_repository import (
    FakeExerciseCatalogRepository,
    default_catalog,
)
from tests.fakes.generated_programs import (
    default_workout_exercises,
    exercise_payload,
    program_payload,
)
from tests.fakes.program_template_repository import FakeProgramTemplateRepository

__all__ = [
    "FakeExerciseCatalogRepository",
    "FakeProgramTemplateRepository",
    "default_catalog",
    "default_workout_exercises",
    "exercise_payload",
    "program_payload",
]
