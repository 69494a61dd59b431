"""
API Schemas.

Pydantic models used for response validation of the sample data endpoints.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AlbumSummary(BaseModel):
    """Album as listed under its singer."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    release_date: Optional[date] = None


class SingerRead(BaseModel):
    """
    Singer with the titles of their albums.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: Optional[str] = None
    last_name: str
    full_name: Optional[str] = Field(default=None, description="Generated by the database from first and last name.")
    active: bool
    albums: List[AlbumSummary] = Field(default_factory=list)


class ConcertRead(BaseModel):
    """Concert of a singer at a venue."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    venue_id: str
    singer_id: str
    start_time: datetime
    end_time: datetime
