"""
Base repository interface and implementation.

Provides common CRUD operations shared by the article, tag and tagging
repositories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=DeclarativeBase)
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")


class BaseRepository(ABC, Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Base repository interface defining common CRUD operations.

    Sessions are passed to every call; repositories hold no
    request-scoped state.
    """

    @abstractmethod
    async def create(
        self, session: AsyncSession, *, obj_in: CreateSchemaType
    ) -> ModelType:
        """Create a new entity."""
        pass

    @abstractmethod
    async def get(self, session: AsyncSession, id: Any) -> Optional[ModelType]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def get_multi(
        self, session: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        """Get multiple entities with pagination."""
        pass

    @abstractmethod
    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, dict[str, Any]],
    ) -> ModelType:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def delete(self, session: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Delete an entity by ID."""
        pass


class BaseSQLAlchemyRepository(
    BaseRepository[ModelType, CreateSchemaType, UpdateSchemaType]
):
    """
    Base SQLAlchemy repository implementation.

    Writes only flush; committing is left to the session owner so a
    whole request stays one transaction.
    """

    def __init__(self, model: type[ModelType]):
        self.model = model

    @staticmethod
    def _to_dict(obj_in: Any, exclude_unset: bool = False) -> dict[str, Any]:
        if hasattr(obj_in, "model_dump"):
            # Pydantic model
            return dict(obj_in.model_dump(exclude_unset=exclude_unset))
        return dict(obj_in) if isinstance(obj_in, dict) else dict(obj_in.__dict__)

    async def create(
        self, session: AsyncSession, *, obj_in: CreateSchemaType
    ) -> ModelType:
        """Create a new entity in the database."""
        db_obj = self.model(**self._to_dict(obj_in))
        session.add(db_obj)
        await session.flush()
        await session.refresh(db_obj)
        return db_obj

    async def get(self, session: AsyncSession, id: Any) -> Optional[ModelType]:
        """Get entity by primary key."""
        # Overridden by subclasses; primary key shapes differ per model
        raise NotImplementedError("Subclasses must implement get() method")

    async def get_multi(
        self, session: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        """Get multiple entities with pagination."""
        result = await session.execute(select(self.model).offset(skip).limit(limit))
        return list(result.scalars().all())

    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, dict[str, Any]],
    ) -> ModelType:
        """Update an existing entity."""
        for field, value in self._to_dict(obj_in, exclude_unset=True).items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        session.add(db_obj)
        await session.flush()
        await session.refresh(db_obj)
        return db_obj

    async def delete(self, session: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Delete an entity by ID."""
        db_obj = await self.get(session, id)
        if db_obj:
            await session.delete(db_obj)
            await session.flush()
        return db_obj

    async def count(self, session: AsyncSession) -> int:
        """Count total number of entities."""
        result = await session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0
