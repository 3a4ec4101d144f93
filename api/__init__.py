"""
API package for the Program Import API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request and response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_catalog_repo,
    get_program_template_repo,
    get_exercise_resolver,
    get_program_materializer,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_catalog_repo",
    "get_program_template_repo",
    # Services
    "get_exercise_resolver",
    "get_program_materializer",
    # Authentication
    "get_current_user",
]
