"""Get current user use case."""

from pydantic import BaseModel

from gallery.domain.service import JWTService, ModerationService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    display_name: str
    avatar_url: str | None
    email: str | None
    is_admin: bool


class GetCurrentUserUseCase:
    """Use case for getting current authenticated user."""

    def __init__(
        self, jwt_service: JWTService, moderation_service: ModerationService
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            moderation_service: Moderation domain service (admin lookup)
        """
        self.jwt_service = jwt_service
        self.moderation_service = moderation_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token and rebuild the principal via JWT service
        2. Check the administrator allow-list

        Args:
            request: Request with JWT token

        Returns:
            Principal information if token is valid

        Raises:
            JWTError: If token is invalid or expired
        """
        principal = self.jwt_service.get_principal(request.token)

        return GetCurrentUserResponse(
            user_id=principal.id,
            display_name=principal.display_name,
            avatar_url=principal.avatar_url,
            email=principal.email,
            is_admin=self.moderation_service.is_admin(principal),
        )
