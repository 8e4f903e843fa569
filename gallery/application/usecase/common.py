"""Shared response models and helpers for gallery use cases."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from gallery.domain.error import UnauthenticatedError
from gallery.domain.model import Design
from gallery.domain.repository import UnitOfWork
from gallery.domain.service import DesignService, GalleryFeed, GallerySnapshot
from gallery.domain.value import Principal, Reaction


class DesignItem(BaseModel):
    """Design as returned by the API."""

    design_id: str
    title: str
    image_url: str
    score: int
    owner_id: str
    owner_display_name: str
    owner_avatar_url: str | None
    created_at: datetime
    my_reaction: Reaction | None = None  # Only set for authenticated callers

    @classmethod
    def from_design(
        cls, design: Design, my_reaction: Optional[Reaction] = None
    ) -> "DesignItem":
        return cls(
            design_id=str(design.id),
            title=design.title,
            image_url=design.image_url,
            score=design.score,
            owner_id=str(design.owner_id),
            owner_display_name=design.owner_display_name,
            owner_avatar_url=design.owner_avatar_url,
            created_at=design.created_at,
            my_reaction=my_reaction,
        )


def require_principal(principal: Principal | None, action: str) -> Principal:
    """Return the principal or raise UnauthenticatedError."""
    if principal is None:
        raise UnauthenticatedError(action)
    return principal


async def publish_snapshot(
    feed: GalleryFeed, design_service: DesignService, unit_of_work: UnitOfWork
) -> GallerySnapshot:
    """Commit the request's changes, then publish the stored gallery.

    Nothing is published if the commit fails.
    """
    await unit_of_work.commit()
    with logfire.span("feed.publish"):
        return await feed.publish_from(design_service.list_designs)
