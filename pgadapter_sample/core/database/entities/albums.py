"""
Album entity models.

Every album belongs to a singer. Tracks are stored in a table that is
interleaved in ``albums``, so deleting an album on Spanner also deletes its
tracks.
"""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import LargeBinary, Numeric
from sqlmodel import Field, Relationship

from ..base import AbstractBaseEntity, new_id

if TYPE_CHECKING:
    from .singers import Singer
    from .tracks import Track


class Album(AbstractBaseEntity, table=True):
    """Entity for albums.

    Table: albums
    """

    __tablename__ = "albums"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    title: str = Field(max_length=200)
    marketing_budget: Optional[Decimal] = Field(default=None, sa_type=Numeric)
    release_date: Optional[date] = Field(default=None)
    cover_picture: Optional[bytes] = Field(default=None, sa_type=LargeBinary)
    singer_id: str = Field(foreign_key="singers.id", max_length=36)

    singer: Optional["Singer"] = Relationship(back_populates="albums")
    tracks: List["Track"] = Relationship(back_populates="album")

    def __repr__(self) -> str:
        return f"Album(id={self.id}, title={self.title}, singer_id={self.singer_id})"
