"""JWT token domain service."""

import logfire

from gallery.config import AuthSettings
from gallery.domain.value import Principal, UserId
from gallery.util.jwt import TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session tokens minted by the identity provider."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_principal(self, token: str) -> Principal:
        """Verify a token and rebuild the principal from its claims.

        The user id is the provider's opaque identifier and is taken as is.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.verify_token(token)
        return Principal(
            id=UserId(payload.user_id),
            display_name=payload.display_name,
            avatar_url=payload.avatar_url,
            email=payload.email,
        )

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Extract the principal from a JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            Principal if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.get_principal(token)
        except Exception as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
