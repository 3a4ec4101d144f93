"""
Unit tests for backend/auth.py
"""

import time

import jwt
import pytest
from fastapi import HTTPException

from backend.auth import JWT_ALGORITHM, validate_jwt

SECRET = "unit-test-jwt-secret-with-enough-length"


def _token(payload=None, secret=SECRET, algorithm=JWT_ALGORITHM):
    claims = {"sub": "coach-1", "exp": int(time.time()) + 3600}
    if payload is not None:
        claims = payload
    return jwt.encode(claims, secret, algorithm=algorithm)


def _reject(authorization, secret=SECRET) -> HTTPException:
    with pytest.raises(HTTPException) as exc_info:
        validate_jwt(authorization, secret)
    assert exc_info.value.status_code == 401
    return exc_info.value


@pytest.mark.unit
class TestValidateJwt:
    """Tests for bearer JWT verification."""

    def test_valid_token_returns_subject(self):
        assert validate_jwt(f"Bearer {_token()}", SECRET) == "coach-1"

    def test_scheme_is_case_insensitive(self):
        assert validate_jwt(f"bearer {_token()}", SECRET) == "coach-1"

    def test_token_without_exp_is_accepted(self):
        assert validate_jwt(f"Bearer {_token({'sub': 'coach-2'})}", SECRET) == "coach-2"

    def test_forged_signature_rejected(self):
        forged = _token(secret="some-other-secret-of-the-same-length!!")

        error = _reject(f"Bearer {forged}")

        assert error.detail.startswith("Invalid token")

    def test_unsigned_token_rejected(self):
        unsigned = jwt.encode({"sub": "coach-1"}, None, algorithm="none")

        _reject(f"Bearer {unsigned}")

    def test_raw_profile_id_rejected(self):
        _reject("Bearer coach-1")

    def test_expired_token_rejected(self):
        expired = _token({"sub": "coach-1", "exp": int(time.time()) - 60})

        assert _reject(f"Bearer {expired}").detail == "Token expired"

    def test_missing_subject_rejected(self):
        no_sub = _token({"exp": int(time.time()) + 3600})

        assert _reject(f"Bearer {no_sub}").detail == "Token missing user ID"

    @pytest.mark.parametrize("header", ["Basic abc", "Bearer ", "Bearer", "token-only"])
    def test_malformed_header_rejected(self, header):
        assert _reject(header).detail == "Invalid authorization header format"

    @pytest.mark.parametrize("secret", [None, ""])
    def test_unconfigured_secret_rejects_everything(self, secret):
        error = _reject(f"Bearer {_token()}", secret=secret)

        assert error.detail == "JWT authentication not configured"
