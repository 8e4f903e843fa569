"""Restore design use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import (
    DesignItem,
    publish_snapshot,
    require_principal,
)
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, ModerationService
from gallery.domain.value import DesignId, Principal


class RestoreDesignRequest(BaseModel):
    """Restore design request."""

    design_id: str  # UUID string
    principal: Principal | None = None  # Acting administrator


class RestoreDesignUseCase:
    """Use case for putting a trashed design back in the gallery."""

    def __init__(
        self,
        moderation_service: ModerationService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.moderation_service = moderation_service
        self.design_service = design_service
        self.feed = feed
        self.unit_of_work = unit_of_work

    async def execute(self, request: RestoreDesignRequest) -> DesignItem:
        """Execute restore design flow.

        Raises:
            UnauthenticatedError: If no principal is present
            ForbiddenError: If the principal is not an administrator
            NotFoundError: If the design is not in the trash
            BusinessRuleViolationError: If the design is already live
        """
        actor = require_principal(request.principal, "restore designs")
        design = await self.moderation_service.restore_design(
            DesignId(UUID(request.design_id)), actor
        )

        await publish_snapshot(self.feed, self.design_service, self.unit_of_work)

        return DesignItem.from_design(design)
