"""
Router package for the Program Import API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- program_import: Generated program import
- exercises: Exercise catalog resolution preview
"""

from api.routers.health import router as health_router
from api.routers.program_import import router as program_import_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "program_import_router",
    "exercises_router",
]
