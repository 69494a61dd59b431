"""
Singer repository.

Provides data access operations for singers, including the last-name
prefix search used when printing sample data.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import func
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.singers import Singer
from .base import AsyncBaseRepository


class SingerRepository(AsyncBaseRepository[Singer]):
    """Repository for singer data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Singer)

    async def find_by_last_name_starting_with(self, prefix: str) -> List[Singer]:
        """Get singers whose last name starts with ``prefix``, with their albums loaded.

        Args:
            prefix: Case-sensitive last name prefix

        Returns:
            Matching singers ordered by last name, then first name
        """
        stmt = (
            select(Singer)
            # Case-sensitive on every backend, unlike LIKE on SQLite
            .where(func.substr(Singer.last_name, 1, len(prefix)) == prefix)
            .options(selectinload(Singer.albums))
            .order_by(Singer.last_name, Singer.first_name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
