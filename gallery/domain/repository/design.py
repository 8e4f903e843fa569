"""Design repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gallery.domain.model.design import Design
from gallery.domain.value import DesignId


class DesignRepository(ABC):
    """Repository for Design aggregate.

    Defines the contract for design persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, design_id: DesignId) -> Optional[Design]:
        """Find a design by ID.

        Args:
            design_id: The design's unique identifier

        Returns:
            The design if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Design]:
        """Find all live designs, newest first.

        Returns:
            List of designs ordered by created_at DESC
        """
        pass

    @abstractmethod
    async def save(self, design: Design) -> Design:
        """Save a design (create or replace).

        Args:
            design: The design to save

        Returns:
            The saved design
        """
        pass

    @abstractmethod
    async def delete(self, design_id: DesignId) -> bool:
        """Delete a design from the live collection.

        Args:
            design_id: The design ID to delete

        Returns:
            True if a design was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def adjust_score(self, design_id: DesignId, delta: int) -> Optional[int]:
        """Atomically add a signed delta to a design's score.

        Implemented as a single store-side increment so concurrent voters
        cannot lose each other's updates.

        Args:
            design_id: The design ID
            delta: Signed amount to add

        Returns:
            The new score, or None if the design does not exist
        """
        pass

    @abstractmethod
    async def set_score(self, design_id: DesignId, score: int) -> Optional[int]:
        """Overwrite a design's score (used by reconciliation).

        Args:
            design_id: The design ID
            score: The recomputed score

        Returns:
            The stored score, or None if the design does not exist
        """
        pass
