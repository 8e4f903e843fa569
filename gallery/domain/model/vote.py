"""Vote entity.

A vote is a single user's reaction to a design. Each user has at most one
live vote per design; retracting deletes the record.
"""

from datetime import datetime

from pydantic import Field

from gallery.domain.model.common import DomainModel
from gallery.domain.value import DesignId, Reaction, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (user, design), enforced by a unique constraint
    - Changing reaction updates the record in place with a fresh timestamp
    """

    id: VoteId
    user_id: UserId
    design_id: DesignId
    reaction: Reaction = Reaction.LIKE
    voted_at: datetime = Field(default_factory=datetime.now)
