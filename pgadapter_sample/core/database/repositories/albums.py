"""
Album repository.

Provides data access operations for albums.
"""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.albums import Album
from .base import AsyncBaseRepository


class AlbumRepository(AsyncBaseRepository[Album]):
    """Repository for album data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Album)
