"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SENTRY_DSN",
    "JWT_SECRET",
    "CATALOG_CANDIDATE_LIMIT",
    "EXERCISE_MATCH_THRESHOLD",
    "CATALOG_PRELOAD",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.is_development is True

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_key is None

    def test_matching_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.catalog_candidate_limit == 20
        assert settings.exercise_match_threshold == 5.0
        assert settings.catalog_preload is False

    def test_sentry_dsn_default_to_none(self, clean_env):
        assert Settings(_env_file=None).sentry_dsn is None

    def test_jwt_secret_default_to_none(self, clean_env):
        assert Settings(_env_file=None).jwt_secret is None


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test that Settings reads environment variables."""

    def test_reads_matching_settings(self, clean_env, monkeypatch):
        monkeypatch.setenv("CATALOG_CANDIDATE_LIMIT", "50")
        monkeypatch.setenv("EXERCISE_MATCH_THRESHOLD", "7.5")
        monkeypatch.setenv("CATALOG_PRELOAD", "true")

        settings = Settings(_env_file=None)

        assert settings.catalog_candidate_limit == 50
        assert settings.exercise_match_threshold == 7.5
        assert settings.catalog_preload is True

    def test_service_role_key_preferred(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

        assert Settings(_env_file=None).supabase_key == "service"

    def test_anon_key_fallback(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

        assert Settings(_env_file=None).supabase_key == "anon"

    def test_reads_jwt_secret(self, clean_env, monkeypatch):
        monkeypatch.setenv("JWT_SECRET", "shared-secret")

        assert Settings(_env_file=None).jwt_secret == "shared-secret"


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validators."""

    def test_environment_is_lowercased(self, clean_env):
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"
        assert settings.is_production is True

    def test_invalid_environment_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(environment="qa", _env_file=None)

    def test_candidate_limit_must_be_positive(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(catalog_candidate_limit=0, _env_file=None)

    def test_threshold_must_be_non_negative(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(exercise_match_threshold=-1, _env_file=None)


@pytest.mark.unit
class TestGetSettings:
    """Test the cached settings accessor."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
