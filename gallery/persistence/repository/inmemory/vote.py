"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from gallery.domain.model.vote import Vote
from gallery.domain.repository.vote import VoteRepository
from gallery.domain.value import DesignId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are keyed by (user, design), so saving twice replaces the record.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[UserId, DesignId], Vote] = {}

    async def find_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> Optional[Vote]:
        """Find a user's vote on a design."""
        return self._votes.get((user_id, design_id))

    async def find_by_user_and_designs(
        self, user_id: UserId, design_ids: Sequence[DesignId]
    ) -> list[Vote]:
        """Find a user's votes on multiple designs (batch query)."""
        if not design_ids:
            return []

        wanted = set(design_ids)
        return [
            v
            for (uid, did), v in self._votes.items()
            if uid == user_id and did in wanted
        ]

    async def find_by_design(self, design_id: DesignId) -> list[Vote]:
        """Find all votes on a design."""
        return [v for v in self._votes.values() if v.design_id == design_id]

    async def save(self, vote: Vote) -> Vote:
        """Upsert a vote."""
        self._votes[(vote.user_id, vote.design_id)] = vote
        return vote

    async def delete_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> bool:
        """Delete a user's vote on a design."""
        return self._votes.pop((user_id, design_id), None) is not None

    async def delete_by_design(self, design_id: DesignId) -> int:
        """Delete all votes on a design."""
        keys = [key for key in self._votes if key[1] == design_id]
        for key in keys:
            del self._votes[key]
        return len(keys)

    async def sum_weights_by_design(self, design_id: DesignId) -> int:
        """Sum reaction weights on a design."""
        return sum(
            v.reaction.weight for v in self._votes.values() if v.design_id == design_id
        )

    def count(self) -> int:
        """Total number of stored votes (test helper)."""
        return len(self._votes)
