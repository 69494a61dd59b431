"""
Base repository interfaces and utilities.

This module provides the foundational repository pattern used by all
repository implementations in the database layer.

Repositories operate on a session they are given and never commit: the
caller owns the transaction. This lets the same repository run inside a
read/write transaction or inside a read-only transaction with a timestamp
bound or directed read options.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import delete, func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with the operations the sample services need."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def find_all(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[EntityType]:
        """List entities with optional pagination.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        """Count all rows of the entity's table."""
        result = await self.session.exec(select(func.count()).select_from(self.model))
        return result.one()

    async def save_all(self, entities: Iterable[EntityType]) -> List[EntityType]:
        """Add entities to the session and flush them in one round trip."""
        entities = list(entities)
        self.session.add_all(entities)
        await self.session.flush()
        return entities

    async def delete_all(self) -> int:
        """Delete all rows of the entity's table.

        Returns:
            Number of deleted rows
        """
        result = await self.session.exec(delete(self.model))
        return result.rowcount
