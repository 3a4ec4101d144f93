"""
Shared pytest fixtures for the program import pipeline.

Provides fake repositories, a wired resolver and materializer, sample
generated programs, and a FastAPI TestClient with dependency overrides.
"""

from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

from api.deps import (
    get_catalog_repo,
    get_current_user,
    get_program_template_repo,
    get_settings,
)
from application.use_cases import ProgramMaterializer
from backend.core.catalog_lookup import ExerciseCatalogLookup
from backend.core.exercise_resolver import ExerciseResolver
from backend.main import create_app
from backend.settings import Settings
from domain.models import GeneratedProgram
from tests.fakes import (
    FakeExerciseCatalogRepository,
    FakeProgramTemplateRepository,
    program_payload,
)


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "coach-123"
TEST_JWT_SECRET = "test-jwt-secret-for-bearer-token-signing"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test coach."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Pipeline Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog_repo() -> FakeExerciseCatalogRepository:
    """Fake catalog seeded with the default exercises."""
    return FakeExerciseCatalogRepository()


@pytest.fixture
def program_repo() -> FakeProgramTemplateRepository:
    """Empty fake persistence store."""
    return FakeProgramTemplateRepository()


@pytest.fixture
def lookup(catalog_repo) -> ExerciseCatalogLookup:
    return ExerciseCatalogLookup(catalog_repo)


@pytest.fixture
def resolver(lookup) -> ExerciseResolver:
    return ExerciseResolver(lookup)


@pytest.fixture
def materializer(resolver, program_repo) -> ProgramMaterializer:
    return ProgramMaterializer(resolver=resolver, program_repo=program_repo)


@pytest.fixture
def sample_program_payload() -> Dict[str, Any]:
    """2 weeks x 2 workouts x 3 exercises."""
    return program_payload()


@pytest.fixture
def sample_program(sample_program_payload) -> GeneratedProgram:
    return GeneratedProgram.model_validate(sample_program_payload)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        sentry_dsn=None,
        jwt_secret=TEST_JWT_SECRET,
        _env_file=None,
    )


@pytest.fixture
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def client(app, test_settings, catalog_repo, program_repo) -> Generator[TestClient, None, None]:
    """
    TestClient wired to the fake repositories.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_catalog_repo] = lambda: catalog_repo
    app.dependency_overrides[get_program_template_repo] = lambda: program_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
