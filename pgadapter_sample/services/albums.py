"""
Album service.

Deletes and generates albums for random existing singers.
"""

from __future__ import annotations

from datetime import date
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.entities import Album
from pgadapter_sample.core.database.repositories import AlbumRepository, SingerRepository
from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import NoParentRowsError

from .random_data import RandomDataService

logger = get_logger(__name__)

EARLIEST_RELEASE_DATE = date(1900, 1, 1)
LATEST_RELEASE_DATE = date(2023, 12, 31)


class AlbumService:
    """Service for album operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data

    async def delete_all_albums(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await AlbumRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} albums")
        return deleted

    async def generate_random_albums(self, count: int) -> List[Album]:
        """Insert ``count`` albums, each for a randomly chosen existing singer.

        Raises:
            NoParentRowsError: If there are no singers
        """
        async with self.session_factory.begin() as session:
            singers = await SingerRepository(session).find_all()
            if not singers:
                raise NoParentRowsError("albums", "singers")
            albums = [
                Album(
                    title=self.random_data.random_title(),
                    marketing_budget=self.random_data.random_amount(1_000, 1_000_000),
                    release_date=self.random_data.random_date(EARLIEST_RELEASE_DATE, LATEST_RELEASE_DATE),
                    cover_picture=self.random_data.random_bytes(16),
                    singer_id=self.random_data.rng.choice(singers).id,
                )
                for _ in range(count)
            ]
            return await AlbumRepository(session).save_all(albums)
