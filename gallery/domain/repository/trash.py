"""Trash repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gallery.domain.model.trash import TrashedDesign
from gallery.domain.value import DesignId


class TrashRepository(ABC):
    """Repository for soft-deleted designs."""

    @abstractmethod
    async def find_by_id(self, design_id: DesignId) -> Optional[TrashedDesign]:
        """Find a trashed design by the original design ID.

        Args:
            design_id: The design's ID

        Returns:
            The trash entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[TrashedDesign]:
        """Find all trashed designs, most recently deleted first."""
        pass

    @abstractmethod
    async def save(self, entry: TrashedDesign) -> TrashedDesign:
        """Save a trash entry.

        Args:
            entry: The trash entry

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def delete(self, design_id: DesignId) -> bool:
        """Remove a trash entry.

        Args:
            design_id: The design's ID

        Returns:
            True if an entry was removed, False if none existed
        """
        pass
