"""In-memory trash repository for testing."""

from typing import Optional

from gallery.domain.model.trash import TrashedDesign
from gallery.domain.repository.trash import TrashRepository
from gallery.domain.value import DesignId


class InMemoryTrashRepository(TrashRepository):
    """In-memory implementation of TrashRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[DesignId, TrashedDesign] = {}

    async def find_by_id(self, design_id: DesignId) -> Optional[TrashedDesign]:
        """Find a trash entry by design ID."""
        return self._entries.get(design_id)

    async def find_all(self) -> list[TrashedDesign]:
        """Find all trash entries, most recently deleted first."""
        return sorted(
            self._entries.values(), key=lambda e: e.deleted_at, reverse=True
        )

    async def save(self, entry: TrashedDesign) -> TrashedDesign:
        """Save a trash entry."""
        self._entries[entry.design.id] = entry
        return entry

    async def delete(self, design_id: DesignId) -> bool:
        """Remove a trash entry."""
        return self._entries.pop(design_id, None) is not None
