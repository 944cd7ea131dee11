"""Encoding and verification of the ``{user_id, exp}`` tokens callers present."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError, field_validator

from murmur.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class JWTError(Exception):
    """A token that must not be trusted."""


class TokenPayload(BaseModel):
    user_id: str
    exp: datetime

    @field_validator("user_id")
    @classmethod
    def user_id_is_uuid(cls, v: str) -> str:
        UUID(v)
        return v


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for ``settings.jwt_expiry_days``."""
    claims = {
        "user_id": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature, expiry and claims.

    Raises:
        JWTError: If any check fails; the message says which
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload(**claims)
    except ValidationError:
        raise JWTError("Invalid token payload")
