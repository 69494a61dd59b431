"""
Concert entity models.

A concert is a singer performing at a venue between a start and an end
time; the database rejects concerts that end before they start.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, Relationship

from ..base import AbstractBaseEntity, new_id

if TYPE_CHECKING:
    from .singers import Singer
    from .venues import Venue


class Concert(AbstractBaseEntity, table=True):
    """Entity for concerts.

    Table: concerts
    """

    __tablename__ = "concerts"
    __table_args__ = (CheckConstraint("end_time > start_time", name="chk_end_time_after_start_time"),)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    venue_id: str = Field(foreign_key="venues.id", max_length=36)
    singer_id: str = Field(foreign_key="singers.id", max_length=36)
    name: str = Field(max_length=200)
    start_time: datetime = Field(sa_type=DateTime(timezone=True))
    end_time: datetime = Field(sa_type=DateTime(timezone=True))

    venue: Optional["Venue"] = Relationship()
    singer: Optional["Singer"] = Relationship()

    def __repr__(self) -> str:
        return f"Concert(id={self.id}, name={self.name}, start_time={self.start_time})"
