"""
Track service.

Deletes and generates tracks for existing albums.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from pgadapter_sample.core.database.entities import Track
from pgadapter_sample.core.database.repositories import AlbumRepository, TrackRepository
from pgadapter_sample.core.logging_config import get_logger
from pgadapter_sample.errors import NoParentRowsError

from .random_data import RandomDataService

logger = get_logger(__name__)


class TrackService:
    """Service for track operations."""

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession], random_data: RandomDataService
    ) -> None:
        self.session_factory = session_factory
        self.random_data = random_data

    async def delete_all_tracks(self) -> int:
        async with self.session_factory.begin() as session:
            deleted = await TrackRepository(session).delete_all()
        logger.debug(f"Deleted {deleted} tracks")
        return deleted

    async def generate_random_tracks(self, num_albums: int, num_tracks: int) -> List[Track]:
        """Insert tracks ``1..num_tracks`` for each of the first ``num_albums`` albums.

        Raises:
            NoParentRowsError: If there are no albums
        """
        async with self.session_factory.begin() as session:
            albums = await AlbumRepository(session).find_all(limit=num_albums)
            if not albums:
                raise NoParentRowsError("tracks", "albums")
            tracks = [
                Track(
                    id=album.id,
                    track_number=track_number,
                    title=self.random_data.random_title(),
                    sample_rate=self.random_data.random_sample_rate(),
                )
                for album in albums
                for track_number in range(1, num_tracks + 1)
            ]
            return await TrackRepository(session).save_all(tracks)
