"""Domain value objects for the gallery."""

from gallery.domain.value.identifiers import DesignId, UserId, VoteId
from gallery.domain.value.types import Principal, Reaction, reaction_weight

__all__ = [
    # Identifiers
    "DesignId",
    "UserId",
    "VoteId",
    # Types
    "Principal",
    "Reaction",
    "reaction_weight",
]
