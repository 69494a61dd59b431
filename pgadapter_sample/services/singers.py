"""
Singer service.

Deletes, generates and prints singers.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.entities import Singer
from pgadapter_sample.core.database.repositories import SingerRepository
from pgadapter_sample.core.logging_config import get_logger

from .random_data import RandomDataService
from .read_only_transaction import ReadOnlyTransactionService

logger = get_logger(__name__)


class SingerService:
    """Service for singer operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data
        self.read_only_transactions = ReadOnlyTransactionService(session_factory)

    async def delete_all_singers(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await SingerRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} singers")
        return deleted

    async def generate_random_singers(self, count: int) -> List[Singer]:
        """Insert ``count`` singers with random names."""
        singers = [
            Singer(
                first_name=self.random_data.random_first_name(),
                last_name=self.random_data.random_last_name(),
                active=self.random_data.random_bool(),
            )
            for _ in range(count)
        ]
        async with self.session_factory.begin() as session:
            return await SingerRepository(session).save_all(singers)

    async def find_singers_with_last_name_starting_with(self, prefix: str) -> List[Singer]:
        """Get singers (with albums) whose last name starts with ``prefix`` in a read-only transaction."""

        async def find(session: AsyncSession) -> List[Singer]:
            return await SingerRepository(session).find_by_last_name_starting_with(prefix)

        return await self.read_only_transactions.execute(find)

    async def print_singers_with_last_name_starting_with(self, prefix: str) -> List[Singer]:
        """Log the singers whose last name starts with ``prefix`` together with their albums."""
        logger.info(f"Fetching all singers whose last name start with an '{prefix}'")
        singers = await self.find_singers_with_last_name_starting_with(prefix)
        for singer in singers:
            logger.info(f"Singer: {singer.full_name} has {len(singer.albums)} albums")
            for album in singer.albums:
                logger.info(f"\tAlbum: {album.title}")
        return singers
