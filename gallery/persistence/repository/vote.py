"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, case, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError

from gallery.domain.error import NotFoundError
from gallery.domain.model import Vote
from gallery.domain.repository import VoteRepository
from gallery.domain.value import DesignId, Reaction, UserId
from gallery.persistence.mappers import map_valid_rows, row_to_vote, vote_to_dict
from gallery.persistence.tables import votes_table

from .base import PostgresRepository


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> Optional[Vote]:
        """Find a user's vote on a design."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.design_id == design_id,
            )
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        votes = map_valid_rows([row._asdict()], row_to_vote)
        return votes[0] if votes else None

    async def find_by_user_and_designs(
        self, user_id: UserId, design_ids: Sequence[DesignId]
    ) -> List[Vote]:
        """Find a user's votes on multiple designs (batch query)."""
        if not design_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.design_id.in_(design_ids),
            )
        )
        result = await self._execute(stmt)
        return map_valid_rows((row._asdict() for row in result.fetchall()), row_to_vote)

    async def find_by_design(self, design_id: DesignId) -> List[Vote]:
        """Find all votes on a design."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.design_id == design_id)
            .order_by(votes_table.c.voted_at)
        )
        result = await self._execute(stmt)
        return map_valid_rows((row._asdict() for row in result.fetchall()), row_to_vote)

    async def save(self, vote: Vote) -> Vote:
        """Upsert a vote on the (user, design) unique constraint.

        Raises:
            NotFoundError: If the design no longer exists
        """
        values = vote_to_dict(vote)
        stmt = insert(votes_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            constraint="uq_vote_user_design",
            set_={"reaction": values["reaction"], "voted_at": values["voted_at"]},
        )
        try:
            # Savepoint so a failed insert leaves the request transaction usable
            async with self.session.begin_nested():
                await self._execute(stmt)
        except IntegrityError:
            # Foreign key violation: design was deleted concurrently
            raise NotFoundError("Design", str(vote.design_id))
        return vote

    async def delete_by_user_and_design(
        self, user_id: UserId, design_id: DesignId
    ) -> bool:
        """Delete a user's vote on a design."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.design_id == design_id,
            )
        )
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_design(self, design_id: DesignId) -> int:
        """Delete all votes on a design."""
        stmt = delete(votes_table).where(votes_table.c.design_id == design_id)
        result = await self._execute(stmt)
        await self._flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def sum_weights_by_design(self, design_id: DesignId) -> int:
        """Likes minus dislikes, computed in SQL."""
        weight = case((votes_table.c.reaction == Reaction.LIKE.value, 1), else_=-1)
        stmt = select(func.coalesce(func.sum(weight), 0)).where(
            votes_table.c.design_id == design_id
        )
        result = await self._execute(stmt)
        return int(result.scalar_one())
