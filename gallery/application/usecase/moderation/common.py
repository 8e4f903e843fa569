"""Moderation response models."""

from datetime import datetime

from pydantic import BaseModel

from gallery.application.usecase.common import DesignItem
from gallery.domain.model import TrashedDesign


class TrashItem(BaseModel):
    """Trashed design as returned by the admin API."""

    design: DesignItem
    vote_count: int
    deleted_at: datetime
    deleted_by: str

    @classmethod
    def from_entry(cls, entry: TrashedDesign) -> "TrashItem":
        return cls(
            design=DesignItem.from_design(entry.design),
            vote_count=len(entry.votes),
            deleted_at=entry.deleted_at,
            deleted_by=str(entry.deleted_by),
        )
