"""Session cookie helpers shared by the routes."""

from fastapi import Request

from gallery.config import AuthSettings
from gallery.domain.service import JWTService
from gallery.domain.value import Principal


def session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the session token from the configured cookie."""
    return request.cookies.get(auth_settings.cookie_name)


def current_principal(
    request: Request, jwt_service: JWTService, auth_settings: AuthSettings
) -> Principal | None:
    """Principal for the request, or None when unauthenticated."""
    return jwt_service.get_principal_from_token(session_token(request, auth_settings))
