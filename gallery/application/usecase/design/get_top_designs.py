"""Get top designs use case."""

from pydantic import BaseModel

from gallery.application.usecase.common import DesignItem
from gallery.config import RankingSettings
from gallery.domain.service import DesignService, top_n


class GetTopDesignsRequest(BaseModel):
    """Get top designs request."""

    n: int | None = None  # Defaults to the configured leaderboard size


class GetTopDesignsResponse(BaseModel):
    """Get top designs response."""

    n: int
    designs: list[DesignItem]


class GetTopDesignsUseCase:
    """Use case for the ranking view."""

    def __init__(
        self, design_service: DesignService, ranking_settings: RankingSettings
    ) -> None:
        self.design_service = design_service
        self.ranking_settings = ranking_settings

    async def execute(self, request: GetTopDesignsRequest) -> GetTopDesignsResponse:
        n = request.n if request.n is not None else self.ranking_settings.top_n
        designs = await self.design_service.list_designs()
        return GetTopDesignsResponse(
            n=n, designs=[DesignItem.from_design(d) for d in top_n(designs, n)]
        )
