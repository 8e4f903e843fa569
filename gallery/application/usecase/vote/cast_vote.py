"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from gallery.application.usecase.common import publish_snapshot, require_principal
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, VoteService
from gallery.domain.value import DesignId, Principal, Reaction


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    design_id: str  # UUID string
    reaction: Reaction
    principal: Principal | None = None  # Authenticated voter


class VoteResponse(BaseModel):
    """Vote response.

    reaction is the caller's reaction after the operation; None means the
    vote was retracted (or never existed).
    """

    design_id: str
    reaction: Reaction | None
    score: int
    delta: int


class CastVoteUseCase:
    """Use case for liking or disliking a design.

    Repeating the current reaction retracts it.
    """

    def __init__(
        self,
        vote_service: VoteService,
        design_service: DesignService,
        feed: GalleryFeed,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            design_service: Design domain service (for snapshots)
            feed: Gallery snapshot feed
            unit_of_work: Commits changes before a snapshot is published
        """
        self.vote_service = vote_service
        self.design_service = design_service
        self.feed = feed
        self.unit_of_work = unit_of_work

    async def execute(self, request: CastVoteRequest) -> VoteResponse:
        """Execute cast vote flow.

        Raises:
            UnauthenticatedError: If no principal is present
            NotFoundError: If the design does not exist
            ValidationError: If dislikes are disabled
            BusinessRuleViolationError: If direct flips are disabled
        """
        principal = require_principal(request.principal, "vote")
        design_id = DesignId(UUID(request.design_id))

        outcome = await self.vote_service.cast_or_toggle_vote(
            principal.id, design_id, request.reaction
        )

        await publish_snapshot(self.feed, self.design_service, self.unit_of_work)

        return VoteResponse(
            design_id=str(outcome.design_id),
            reaction=outcome.reaction,
            score=outcome.score,
            delta=outcome.delta,
        )
