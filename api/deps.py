"""
FastAPI Dependency Providers for the Program Import API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- The preloaded in-memory catalog is cached per-process when enabled
- Repository and service providers create new instances per-request

Usage in routers:
    from api.deps import get_program_materializer, get_current_user
    from application.use_cases import ProgramMaterializer

    @router.post("/programs/import")
    def import_program(
        program: GeneratedProgram,
        owner_id: str = Depends(get_current_user),
        materializer: ProgramMaterializer = Depends(get_program_materializer),
    ):
        return materializer.materialize(program, owner_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_catalog_repo] = lambda: FakeExerciseCatalogRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseCatalogRepository,
    ProgramTemplateRepository,
)

# Concrete implementations
from infrastructure import (
    InMemoryExerciseCatalogRepository,
    SupabaseExerciseCatalogRepository,
    SupabaseProgramTemplateRepository,
)

from application.use_cases import ProgramMaterializer
from backend.auth import validate_jwt
from backend.core.catalog_lookup import ExerciseCatalogLookup
from backend.core.exercise_resolver import ExerciseResolver, ScoringWeights
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


@lru_cache
def _preloaded_catalog() -> InMemoryExerciseCatalogRepository:
    """Load the exercise catalog into memory once per process."""
    return InMemoryExerciseCatalogRepository.load_from(
        SupabaseExerciseCatalogRepository(get_supabase_client_required())
    )


# =============================================================================
# Repository Providers
# =============================================================================


def get_catalog_repo(
    settings: Settings = Depends(get_settings),
) -> ExerciseCatalogRepository:
    """
    Get ExerciseCatalogRepository implementation.

    Returns the process-wide in-memory catalog when catalog_preload is
    enabled, otherwise a SupabaseExerciseCatalogRepository.

    Returns:
        ExerciseCatalogRepository: Repository for exercise catalog queries
    """
    if settings.catalog_preload:
        return _preloaded_catalog()
    return SupabaseExerciseCatalogRepository(get_supabase_client_required())


def get_program_template_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramTemplateRepository:
    """
    Get ProgramTemplateRepository implementation.

    Args:
        client: Supabase client (injected)

    Returns:
        ProgramTemplateRepository: Repository for program template persistence
    """
    return SupabaseProgramTemplateRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_exercise_resolver(
    catalog_repo: ExerciseCatalogRepository = Depends(get_catalog_repo),
    settings: Settings = Depends(get_settings),
) -> ExerciseResolver:
    """
    Get an ExerciseResolver configured from settings.

    Args:
        catalog_repo: Exercise catalog repository (injected)
        settings: Application settings (injected)

    Returns:
        ExerciseResolver: Resolver for catalog exercise ids
    """
    lookup = ExerciseCatalogLookup(catalog_repo, limit=settings.catalog_candidate_limit)
    return ExerciseResolver(
        lookup,
        weights=ScoringWeights(threshold=settings.exercise_match_threshold),
    )


def get_program_materializer(
    resolver: ExerciseResolver = Depends(get_exercise_resolver),
    program_repo: ProgramTemplateRepository = Depends(get_program_template_repo),
) -> ProgramMaterializer:
    """
    Get ProgramMaterializer use case with injected dependencies.

    Args:
        resolver: Exercise resolver (injected)
        program_repo: Program template repository (injected)

    Returns:
        ProgramMaterializer: Use case for importing generated programs
    """
    return ProgramMaterializer(resolver=resolver, program_repo=program_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the coach profile ID of the caller.

    Verifies the bearer JWT against the configured JWT secret and returns
    its `sub` claim.

    Args:
        authorization: Bearer token header
        settings: Application settings (injected)

    Returns:
        str: Coach profile ID

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return validate_jwt(authorization, settings.jwt_secret)


# =============================================================================
# Exports
# =============================================================================

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
