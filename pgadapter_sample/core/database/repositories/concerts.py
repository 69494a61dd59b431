"""
Concert repository.

Provides data access operations for concerts.
"""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.concerts import Concert
from .base import AsyncBaseRepository, QueryBuilder


class ConcertRepository(AsyncBaseRepository[Concert]):
    """Repository for concert data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Concert)

    async def find_all(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Concert]:
        """List concerts ordered by start time.

        Args:
            limit: Maximum records to return
            offset: Records to skip

        Returns:
            List of Concert instances
        """
        stmt = select(Concert).order_by(Concert.start_time, Concert.id)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.exec(stmt)
        return list(result.all())
