"""
Concert service.

Deletes, generates and lists concerts. Generated concerts pair a random
singer with a random venue and last between one and four hours.
"""

from __future__ import annotations

from datetime import timedelta
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.base import utc_now
from pgadapter_sample.core.database.entities import Concert
from pgadapter_sample.core.database.repositories import (
    ConcertRepository,
    SingerRepository,
    VenueRepository,
)
from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import NoParentRowsError

from .random_data import RandomDataService

logger = get_logger(__name__)


class ConcertService:
    """Service for concert operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data

    async def delete_all_concerts(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await ConcertRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} concerts")
        return deleted

    async def find_all_concerts(self) -> List[Concert]:
        """List all concerts using a strong read."""
        async with self.session_factory.begin() as session:
            return await ConcertRepository(session).find_all()

    async def generate_random_concerts(self, count: int) -> List[Concert]:
        """Insert ``count`` concerts for random singers at random venues.

        Raises:
            NoParentRowsError: If there are no singers or no venues
        """
        rng = self.random_data.rng
        async with self.session_factory.begin() as session:
            singers = await SingerRepository(session).find_all()
            if not singers:
                raise NoParentRowsError("concerts", "singers")
            venues = await VenueRepository(session).find_all()
            if not venues:
                raise NoParentRowsError("concerts", "venues")
            now = utc_now().replace(minute=0, second=0, microsecond=0)
            concerts = []
            for _ in range(count):
                start_time = now + timedelta(days=rng.randint(1, 365), hours=rng.randint(0, 23))
                concerts.append(
                    Concert(
                        singer_id=rng.choice(singers).id,
                        venue_id=rng.choice(venues).id,
                        name=self.random_data.random_title(),
                        start_time=start_time,
                        end_time=start_time + timedelta(hours=rng.randint(1, 4)),
                    )
                )
            return await ConcertRepository(session).save_all(concerts)
