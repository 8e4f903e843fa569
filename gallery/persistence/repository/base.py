"""Shared behaviour for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.error import StoreUnavailableError


class PostgresRepository:
    """Base class holding the request session.

    Driver and connection failures surface as StoreUnavailableError;
    integrity errors are left for the caller to interpret.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.session.execute(stmt)
        except IntegrityError:
            raise
        except DBAPIError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise StoreUnavailableError(f"Database unavailable: {e.orig}") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError:
            raise
        except DBAPIError as e:
            logfire.error(
                "Database flush failed", repository=type(self).__name__, error=str(e)
            )
            raise StoreUnavailableError(f"Database unavailable: {e.orig}") from e
