"""List designs use case."""

import logfire
from pydantic import BaseModel

from gallery.application.usecase.common import DesignItem
from gallery.config import RankingSettings
from gallery.domain.service import DesignService, VoteService, top_n
from gallery.domain.value import UserId


class ListDesignsRequest(BaseModel):
    """List designs request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListDesignsResponse(BaseModel):
    """List designs response."""

    designs: list[DesignItem]
    top: list[DesignItem]
    total: int


class ListDesignsUseCase:
    """Use case for the gallery page: every design plus the leaderboard."""

    def __init__(
        self,
        design_service: DesignService,
        vote_service: VoteService,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize list designs use case.

        Args:
            design_service: Design domain service
            vote_service: Vote domain service
            ranking_settings: Leaderboard size
        """
        self.design_service = design_service
        self.vote_service = vote_service
        self.ranking_settings = ranking_settings

    async def execute(self, request: ListDesignsRequest) -> ListDesignsResponse:
        """Execute list designs flow.

        Args:
            request: List designs request

        Returns:
            Designs newest first, the caller's reactions, and the top designs
        """
        with logfire.span("list_designs.execute", user_id=request.user_id):
            designs = await self.design_service.list_designs()

            # Get user's reactions for these designs (if authenticated)
            reactions = {}
            if request.user_id and designs:
                reactions = await self.vote_service.get_user_votes(
                    UserId(request.user_id), [d.id for d in designs]
                )

            items = [
                DesignItem.from_design(d, reactions.get(d.id)) for d in designs
            ]
            top = [
                DesignItem.from_design(d, reactions.get(d.id))
                for d in top_n(designs, self.ranking_settings.top_n)
            ]

            logfire.info("Designs listed", count=len(items))

            return ListDesignsResponse(designs=items, top=top, total=len(items))
