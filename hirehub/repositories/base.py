"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this. Reads go through
``_select()`` so every entity comes back with the related rows its
response needs already loaded; async sessions cannot lazy-load later.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar, Union
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hirehub.core.database import Base

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

EntityId = Union[UUID, int]


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class EmployerRepository(BaseRepository[Employer]):
            def __init__(self):
                super().__init__(Employer)

            def load_options(self):
                return [selectinload(Employer.user)]
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def load_options(self) -> list:
        """Loader options applied to every read. Override per entity."""
        return []

    def _select(self) -> Select:
        # populate_existing refreshes objects already in the identity map
        return (
            select(self.model)
            .options(*self.load_options())
            .execution_options(populate_existing=True)
        )

    async def _all(self, db: AsyncSession, query: Select) -> List[ModelType]:
        result = await db.execute(query)
        return list(result.scalars().unique().all())

    async def get_by_id(
        self,
        db: AsyncSession,
        id: EntityId,
    ) -> Optional[ModelType]:
        """Get a single record by ID."""
        result = await db.execute(self._select().where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        order_by: Any = None,
    ) -> List[ModelType]:
        """Every row, no pagination."""
        query = self._select().order_by(order_by if order_by is not None else self.model.id)
        return await self._all(db, query)

    async def count(
        self,
        db: AsyncSession,
    ) -> int:
        """Get total count of records."""
        result = await db.execute(
            select(func.count()).select_from(self.model)
        )
        return result.scalar() or 0

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """Insert a new record and return it with relations loaded."""
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        return await self.get_by_id(db, instance.id)

    async def update(
        self,
        db: AsyncSession,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """Overwrite the given fields and return the reloaded record."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await db.flush()
        return await self.get_by_id(db, instance.id)

    async def delete(
        self,
        db: AsyncSession,
        id: EntityId,
    ) -> bool:
        """Hard delete a record by ID."""
        result = await db.execute(
            delete(self.model).where(self.model.id == id)
        )
        return result.rowcount > 0
