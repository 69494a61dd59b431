"""
Track entity models.

Tracks are interleaved in their parent album: the first primary key column
is the album id, the second the track number.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import BigInteger, Float
from sqlmodel import Field, Relationship

from ..base import AbstractBaseEntity

if TYPE_CHECKING:
    from .albums import Album


class Track(AbstractBaseEntity, table=True):
    """Entity for album tracks.

    Table: tracks (interleaved in albums)
    """

    __tablename__ = "tracks"

    id: str = Field(foreign_key="albums.id", primary_key=True, max_length=36)
    track_number: int = Field(
        primary_key=True,
        sa_type=BigInteger,
        sa_column_kwargs={"autoincrement": False},
    )
    title: str = Field(max_length=200)
    sample_rate: float = Field(sa_type=Float)

    album: Optional["Album"] = Relationship(back_populates="tracks")

    def __repr__(self) -> str:
        return f"Track(id={self.id}, track_number={self.track_number}, title={self.title})"
