"""Session token domain service."""

import logfire

from showcase.config import AuthSettings
from showcase.domain.value import UserId
from showcase.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the acting user from the ``auth_token`` cookie.

    Routes never reject a bad cookie themselves. An absent, expired or forged
    token yields an anonymous caller, and use cases that need a user raise
    NotAuthenticatedError.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def decode(self, token: str) -> TokenPayload:
        """Verify a session token.

        Raises:
            JWTError: If the token cannot be trusted
        """
        return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Return the acting user's ID, or None for an anonymous caller."""
        if not token:
            return None

        try:
            payload = self.decode(token)
        except JWTError as e:
            logfire.debug("Ignoring session cookie", reason=str(e))
            return None
        return UserId(payload.user_id)
