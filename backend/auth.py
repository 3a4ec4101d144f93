"""
Authentication for the program import API.

Callers present `Authorization: Bearer <jwt>`. Tokens are HS256 JWTs signed
with the shared JWT_SECRET; the `sub` claim is the coach profile id that
owns imported programs.
"""
import jwt
from fastapi import HTTPException
from typing import Optional
import logging

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


def validate_jwt(authorization: str, secret: Optional[str]) -> str:
    """
    Validate a bearer JWT and return the coach profile id.

    Only HS256 signatures made with `secret` are accepted, so unsigned
    (alg "none") and forged tokens are rejected. `exp` is enforced when
    the token carries one.

    Args:
        authorization: Authorization header value
        secret: Shared signing secret, or None if not configured

    Returns:
        str: Coach profile id from the `sub` claim

    Raises:
        HTTPException: 401 for any missing, malformed, expired or invalid token
    """
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    if not secret:
        logger.warning("JWT authentication not configured (JWT_SECRET env var empty)")
        raise HTTPException(status_code=401, detail="JWT authentication not configured")

    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")

    logger.debug(f"JWT validated for user: {user_id}")
    return user_id
