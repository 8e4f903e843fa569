"""PostgreSQL unit of work."""

import logfire
from sqlalchemy.exc import DBAPIError

from gallery.domain.error import StoreUnavailableError
from gallery.domain.repository import UnitOfWork

from .base import PostgresRepository


class PostgresUnitOfWork(PostgresRepository, UnitOfWork):
    """Commits the request session.

    The session stays open after a commit; later statements run in a new
    transaction that sees every change committed so far.
    """

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except DBAPIError as e:
            logfire.error("Database commit failed", error=str(e))
            await self.session.rollback()
            raise StoreUnavailableError(f"Database unavailable: {e.orig}") from e
        logfire.debug("Session committed")
