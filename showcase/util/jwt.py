"""Session token encoding.

The session cookie carries an HS256 JWT with the user's ID and username.
Login lives with the identity collaborator; ``create_token`` is kept here so
scripts and tests can mint tokens the API will accept.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from showcase.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "iat", "user_id"]


class TokenPayload(BaseModel):
    """Decoded session claims."""

    user_id: int
    username: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Session token could not be verified."""


def create_token(
    user_id: int,
    username: str,
    settings: AuthSettings,
    now: datetime | None = None,
) -> str:
    """Sign a session token valid for ``jwt_expiry_days``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of a session token.

    Raises:
        JWTError: If the token is expired, badly signed or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Session has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Session token lacks claim {e.claim!r}") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Session token is invalid") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Session token has malformed claims") from e
