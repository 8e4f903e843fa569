"""Retract vote use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import publish_snapshot, require_principal
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, VoteService
from gallery.domain.value import DesignId, Principal

from .cast_vote import VoteResponse


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    design_id: str  # UUID string
    principal: Principal | None = None  # Authenticated voter


class RetractVoteUseCase:
    """Use case for removing the caller's vote from a design."""

    def __init__(
        self,
        vote_service: VoteService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> None:
        self.vote_service = vote_service
        self.design_service = design_service
        self.feed = feed
        self.unit_of_work = unit_of_work

    async def execute(self, request: RetractVoteRequest) -> VoteResponse:
        """Execute retract vote flow.

        Retracting a vote that does not exist returns delta 0 and publishes
        nothing.

        Raises:
            UnauthenticatedError: If no principal is present
            NotFoundError: If the design does not exist
        """
        principal = require_principal(request.principal, "remove votes")
        design_id = DesignId(UUID(request.design_id))

        outcome = await self.vote_service.retract_vote(principal.id, design_id)

        if outcome.delta != 0:
            await publish_snapshot(self.feed, self.design_service, self.unit_of_work)

        return VoteResponse(
            design_id=str(outcome.design_id),
            reaction=None,
            score=outcome.score,
            delta=outcome.delta,
        )
