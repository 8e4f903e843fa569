"""In-memory design repository for testing."""

from typing import Optional

from gallery.domain.model.design import Design
from gallery.domain.repository.design import DesignRepository
from gallery.domain.value import DesignId


class InMemoryDesignRepository(DesignRepository):
    """In-memory implementation of DesignRepository for testing."""

    def __init__(self) -> None:
        self._designs: dict[DesignId, Design] = {}

    async def find_by_id(self, design_id: DesignId) -> Optional[Design]:
        """Find a design by ID."""
        return self._designs.get(design_id)

    async def find_all(self) -> list[Design]:
        """Find all designs, newest first."""
        return sorted(
            self._designs.values(), key=lambda d: d.created_at, reverse=True
        )

    async def save(self, design: Design) -> Design:
        """Save or replace a design."""
        self._designs[design.id] = design
        return design

    async def delete(self, design_id: DesignId) -> bool:
        """Delete a design."""
        return self._designs.pop(design_id, None) is not None

    async def adjust_score(self, design_id: DesignId, delta: int) -> Optional[int]:
        """Add delta to the score (single-threaded, so trivially atomic)."""
        design = self._designs.get(design_id)
        if design is None:
            return None
        # Designs are immutable
        updated = design.model_copy(update={"score": design.score + delta})
        self._designs[design_id] = updated
        return updated.score

    async def set_score(self, design_id: DesignId, score: int) -> Optional[int]:
        """Overwrite the score."""
        design = self._designs.get(design_id)
        if design is None:
            return None
        self._designs[design_id] = design.model_copy(update={"score": score})
        return score
