"""Trashed design entity.

Deleting a design moves it here together with its votes so an
administrator can reinstate it unchanged.
"""

from datetime import datetime

from pydantic import Field

from gallery.domain.model.common import DomainModel
from gallery.domain.model.design import Design
from gallery.domain.model.vote import Vote
from gallery.domain.value import UserId


class TrashedDesign(DomainModel):
    """A soft-deleted design and the votes it had at deletion time."""

    design: Design
    votes: list[Vote] = []
    deleted_at: datetime = Field(default_factory=datetime.now)
    deleted_by: UserId
