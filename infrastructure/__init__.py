"""
Infrastructure Layer for the Program Import API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations and the in-memory catalog
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    InMemoryExerciseCatalogRepository,
    SupabaseExerciseCatalogRepository,
    SupabaseProgramTemplateRepository,
)

__all__ = [
    "SupabaseExerciseCatalogRepository",
    "InMemoryExerciseCatalogRepository",
    "SupabaseProgramTemplateRepository",
]
