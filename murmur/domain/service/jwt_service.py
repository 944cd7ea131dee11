"""Identity provider backed by signed JWTs."""

from uuid import UUID

import logfire

from murmur.config import AuthSettings
from murmur.domain.error import InvalidCredentialError, MissingCredentialError
from murmur.domain.value import UserId
from murmur.util.jwt import JWTError, create_token, verify_token


class JWTService:
    """Turns a request credential into the caller's user ID.

    A credential is accepted when its signature verifies, it has not
    expired, and its ``user_id`` claim is a UUID. Whether that user still
    exists is left to the use case that needs the user record.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId) -> str:
        """Issue a credential for a user (operators and tests)."""
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            return create_token(str(user_id), self.auth_settings)

    def authenticate(self, *credentials: str | None) -> UserId:
        """Resolve the first credential presented to a user ID.

        Args:
            credentials: Candidate tokens in priority order, e.g. the
                ``x-auth-token`` header followed by the ``auth_token`` cookie

        Returns:
            The caller's user ID

        Raises:
            MissingCredentialError: If no credential was presented
            InvalidCredentialError: If the credential does not verify
        """
        token = next((c for c in credentials if c), None)
        if token is None:
            logfire.info("Request without credential")
            raise MissingCredentialError()

        with logfire.span("jwt_service.authenticate"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Credential rejected", error=str(e))
                raise InvalidCredentialError(str(e))

            return UserId(UUID(payload.user_id))
