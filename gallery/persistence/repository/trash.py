"""PostgreSQL implementation of Trash repository."""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert

from gallery.domain.model import TrashedDesign
from gallery.domain.repository import TrashRepository
from gallery.domain.value import DesignId
from gallery.persistence.mappers import (
    map_valid_rows,
    row_to_trashed_design,
    trashed_design_to_dict,
)
from gallery.persistence.tables import trashed_designs_table

from .base import PostgresRepository


class PostgresTrashRepository(PostgresRepository, TrashRepository):
    """PostgreSQL implementation of TrashRepository."""

    async def find_by_id(self, design_id: DesignId) -> Optional[TrashedDesign]:
        """Find a trash entry by design ID."""
        stmt = select(trashed_designs_table).where(
            trashed_designs_table.c.design_id == design_id
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        entries = map_valid_rows([row._asdict()], row_to_trashed_design)
        return entries[0] if entries else None

    async def find_all(self) -> List[TrashedDesign]:
        """Find all trash entries, most recently deleted first."""
        stmt = select(trashed_designs_table).order_by(
            trashed_designs_table.c.deleted_at.desc()
        )
        result = await self._execute(stmt)
        return map_valid_rows(
            (row._asdict() for row in result.fetchall()), row_to_trashed_design
        )

    async def save(self, entry: TrashedDesign) -> TrashedDesign:
        """Insert or replace a trash entry."""
        values = trashed_design_to_dict(entry)
        stmt = insert(trashed_designs_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[trashed_designs_table.c.design_id],
            set_={k: v for k, v in values.items() if k != "design_id"},
        )
        await self._execute(stmt)
        await self._flush()
        return entry

    async def delete(self, design_id: DesignId) -> bool:
        """Remove a trash entry."""
        stmt = delete(trashed_designs_table).where(
            trashed_designs_table.c.design_id == design_id
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
