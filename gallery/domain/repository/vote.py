"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from gallery.domain.model.vote import Vote
from gallery.domain.value import DesignId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> Optional[Vote]:
        """Find a user's vote on a design.

        Args:
            user_id: The user's ID
            design_id: The design's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_designs(
        self, user_id: UserId, design_ids: Sequence[DesignId]
    ) -> List[Vote]:
        """Find a user's votes on multiple designs (batch query).

        Args:
            user_id: The user's ID
            design_ids: Design IDs to check

        Returns:
            List of votes by the user on the specified designs
        """
        pass

    @abstractmethod
    async def find_by_design(self, design_id: DesignId) -> List[Vote]:
        """Find all votes on a design.

        Args:
            design_id: The design's ID

        Returns:
            List of votes on the design
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Upsert a vote.

        If the user already has a vote on the design it is replaced in
        place, keeping a single record per (user, design).

        Args:
            vote: The vote to save

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> bool:
        """Delete a user's vote on a design.

        Args:
            user_id: The user's ID
            design_id: The design's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_design(self, design_id: DesignId) -> int:
        """Delete every vote on a design.

        Args:
            design_id: The design's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def sum_weights_by_design(self, design_id: DesignId) -> int:
        """Sum the reaction weights of all votes on a design.

        Args:
            design_id: The design's ID

        Returns:
            Likes minus dislikes
        """
        pass
