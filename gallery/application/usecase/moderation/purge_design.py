"""Purge design use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import require_principal
from gallery.domain.service import ModerationService
from gallery.domain.value import DesignId, Principal


class PurgeDesignRequest(BaseModel):
    """Purge design request."""

    design_id: str  # UUID string
    confirm: bool = False
    principal: Principal | None = None  # Acting administrator


class PurgeDesignResponse(BaseModel):
    """Purge design response."""

    success: bool
    message: str


class PurgeDesignUseCase:
    """Use case for permanently erasing a trashed design."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: PurgeDesignRequest) -> PurgeDesignResponse:
        """Execute purge design flow.

        The live gallery is untouched, so no snapshot is published.

        Raises:
            UnauthenticatedError: If no principal is present
            ForbiddenError: If the principal is not an administrator
            BusinessRuleViolationError: If confirm is not set
            NotFoundError: If the design is not in the trash
        """
        actor = require_principal(request.principal, "erase designs")
        await self.moderation_service.purge_design(
            DesignId(UUID(request.design_id)), actor, confirm=request.confirm
        )
        return PurgeDesignResponse(
            success=True, message="Design permanently erased"
        )
