"""
Database infrastructure package.

Supabase implementations of the repository ports, plus the in-memory
exercise catalog used when the catalog is preloaded.
"""

from infrastructure.db.exercise_catalog_repository import (
    InMemoryExerciseCatalogRepository,
    SupabaseExerciseCatalogRepository,
)
from infrastructure.db.program_template_repository import SupabaseProgramTemplateRepository

__all__ = [
    "SupabaseExerciseCatalogRepository",
    "InMemoryExerciseCatalogRepository",
    "SupabaseProgramTemplateRepository",
]
