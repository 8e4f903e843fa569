"""Get design use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import DesignItem
from gallery.domain.service import DesignService, VoteService
from gallery.domain.value import DesignId, UserId


class GetDesignRequest(BaseModel):
    """Get design request."""

    design_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetDesignUseCase:
    """Use case for retrieving a single design."""

    def __init__(self, design_service: DesignService, vote_service: VoteService) -> None:
        self.design_service = design_service
        self.vote_service = vote_service

    async def execute(self, request: GetDesignRequest) -> DesignItem:
        """Raises NotFoundError if the design does not exist."""
        design_id = DesignId(UUID(request.design_id))
        design = await self.design_service.get_by_id(design_id)

        my_reaction = None
        if request.user_id:
            votes = await self.vote_service.get_user_votes(
                UserId(request.user_id), [design_id]
            )
            my_reaction = votes.get(design_id)

        return DesignItem.from_design(design, my_reaction)
