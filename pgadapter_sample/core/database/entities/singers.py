"""
Singer entity models.

Singers are the root of the sample data model: albums and concerts both
reference a singer. ``full_name`` is a stored generated column computed by
the database from the first and last name.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, Computed, String
from sqlmodel import Field, Relationship

from ..base import AbstractBaseEntity, new_id

if TYPE_CHECKING:
    from .albums import Album

FULL_NAME_EXPRESSION = (
    "CASE WHEN first_name IS NULL THEN last_name "
    "WHEN last_name IS NULL THEN first_name "
    "ELSE first_name || ' ' || last_name END"
)


class Singer(AbstractBaseEntity, table=True):
    """Entity for singers.

    Table: singers
    """

    __tablename__ = "singers"
    __mapper_args__ = {"eager_defaults": True}

    id: str = Field(default_factory=new_id, primary_key=True, max_length=36)
    first_name: Optional[str] = Field(default=None, max_length=200)
    last_name: str = Field(max_length=200, index=True)
    full_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(400), Computed(FULL_NAME_EXPRESSION, persisted=True)),
    )
    active: bool = Field(default=True)

    albums: List["Album"] = Relationship(back_populates="singer")

    def __repr__(self) -> str:
        return f"Singer(id={self.id}, first_name={self.first_name}, last_name={self.last_name})"
