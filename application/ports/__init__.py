"""
Port interfaces (Protocols) for the Program Import API.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_catalog_repository import ExerciseCatalogRepository
from application.ports.program_template_repository import ProgramTemplateRepository

__all__ = [
    "ExerciseCatalogRepository",
    "ProgramTemplateRepository",
]
