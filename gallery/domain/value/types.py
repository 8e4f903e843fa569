"""Domain value objects for the gallery.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field

from gallery.domain.value.common import ValueObject
from gallery.domain.value.identifiers import UserId


class Reaction(str, Enum):
    """A user's reaction to a design.

    A missing vote record is the neutral state (weight 0).
    """

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def weight(self) -> int:
        """Signed contribution of this reaction to a design's score."""
        return 1 if self is Reaction.LIKE else -1

    @property
    def opposite(self) -> "Reaction":
        """The other reaction."""
        return Reaction.DISLIKE if self is Reaction.LIKE else Reaction.LIKE


def reaction_weight(reaction: Reaction | None) -> int:
    """Weight of an optional reaction (None counts as 0)."""
    return reaction.weight if reaction is not None else 0


class Principal(ValueObject):
    """Authenticated identity supplied by the identity provider."""

    id: UserId
    display_name: str = Field(min_length=1, max_length=255)
    avatar_url: str | None = None
    email: str | None = None
