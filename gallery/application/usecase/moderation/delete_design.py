"""Delete design use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import publish_snapshot, require_principal
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, ModerationService
from gallery.domain.value import DesignId, Principal

from .common import TrashItem


class DeleteDesignRequest(BaseModel):
    """Delete design request."""

    design_id: str  # UUID string
    principal: Principal | None = None  # Acting administrator


class DeleteDesignUseCase:
    """Use case for moving a design (and its votes) to the trash."""

    def __init__(
        self,
        moderation_service: ModerationService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize delete design use case.

        Args:
            moderation_service: Moderation domain service
            design_service: Design domain service (for snapshots)
            feed: Gallery snapshot feed
            unit_of_work: Commits changes before a snapshot is published
        """
        self.moderation_service = moderation_service
        self.design_service = design_service
        self.feed = feed
        self.unit_of_work = unit_of_work

    async def execute(self, request: DeleteDesignRequest) -> TrashItem:
        """Execute delete design flow.

        Raises:
            UnauthenticatedError: If no principal is present
            ForbiddenError: If the principal is not an administrator
            NotFoundError: If the design does not exist
        """
        actor = require_principal(request.principal, "delete designs")
        entry = await self.moderation_service.delete_design(
            DesignId(UUID(request.design_id)), actor
        )

        await publish_snapshot(self.feed, self.design_service, self.unit_of_work)

        return TrashItem.from_entry(entry)
