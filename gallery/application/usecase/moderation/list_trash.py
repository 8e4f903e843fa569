"""List trash use case."""

from pydantic import BaseModel

from gallery.application.usecase.common import require_principal
from gallery.domain.service import ModerationService
from gallery.domain.value import Principal

from .common import TrashItem


class ListTrashRequest(BaseModel):
    """List trash request."""

    principal: Principal | None = None  # Acting administrator


class ListTrashResponse(BaseModel):
    """List trash response."""

    items: list[TrashItem]
    total: int


class ListTrashUseCase:
    """Use case for browsing trashed designs."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ListTrashRequest) -> ListTrashResponse:
        actor = require_principal(request.principal, "view the trash")
        entries = await self.moderation_service.list_trash(actor)
        items = [TrashItem.from_entry(entry) for entry in entries]
        return ListTrashResponse(items=items, total=len(items))
