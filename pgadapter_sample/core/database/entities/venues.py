"""
Venue entity models.

The description of a venue is a free-form JSON document (capacity, type,
location) stored as ``jsonb``.
"""

from typing import Any, Dict

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field

from ..base import AbstractBaseEntity, new_id


class Venue(AbstractBaseEntity, table=True):
    """Entity for concert venues.

    Table: venues
    """

    __tablename__ = "venues"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    name: str = Field(max_length=200)
    description: Dict[str, Any] = Field(default_factory=dict, sa_type=JSONB().with_variant(JSON(), "sqlite"))

    def __repr__(self) -> str:
        return f"Venue(id={self.id}, name={self.name})"
