"""PostgreSQL implementation of Design repository."""

from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert

from gallery.domain.model import Design
from gallery.domain.repository import DesignRepository
from gallery.domain.value import DesignId
from gallery.persistence.mappers import design_to_dict, map_valid_rows, row_to_design
from gallery.persistence.tables import designs_table

from .base import PostgresRepository


class PostgresDesignRepository(PostgresRepository, DesignRepository):
    """PostgreSQL implementation of DesignRepository."""

    async def find_by_id(self, design_id: DesignId) -> Optional[Design]:
        """Find a design by ID."""
        stmt = select(designs_table).where(designs_table.c.id == design_id)
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        designs = map_valid_rows([row._asdict()], row_to_design)
        return designs[0] if designs else None

    async def find_all(self) -> List[Design]:
        """Find all designs, newest first."""
        stmt = select(designs_table).order_by(designs_table.c.created_at.desc())
        result = await self._execute(stmt)
        return map_valid_rows((row._asdict() for row in result.fetchall()), row_to_design)

    async def save(self, design: Design) -> Design:
        """Insert or replace a design."""
        values = design_to_dict(design)
        stmt = insert(designs_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[designs_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self._execute(stmt)
        await self._flush()
        return design

    async def delete(self, design_id: DesignId) -> bool:
        """Delete a design."""
        stmt = delete(designs_table).where(designs_table.c.id == design_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_score(self, design_id: DesignId, delta: int) -> Optional[int]:
        """Atomically add delta to the score.

        Uses SQL-level increment to avoid lost updates.
        """
        stmt = (
            update(designs_table)
            .where(designs_table.c.id == design_id)
            .values(score=designs_table.c.score + delta)
            .returning(designs_table.c.score)
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.scalar_one_or_none()

    async def set_score(self, design_id: DesignId, score: int) -> Optional[int]:
        """Overwrite the score."""
        stmt = (
            update(designs_table)
            .where(designs_table.c.id == design_id)
            .values(score=score)
            .returning(designs_table.c.score)
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.scalar_one_or_none()
