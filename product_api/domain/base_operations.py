from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseOperations(Generic[ModelType]):
    """Base CRUD operations keyed by an integer primary key.

    Every method issues exactly one SQL statement on the session it is given.
    """

    def __init__(self, model: type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: int) -> ModelType | None:
        """Get a single record by ID."""
        statement = select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    async def get_multi(self, db: AsyncSession) -> list[ModelType]:
        """Get every record, in whatever order the store returns them."""
        result = await db.execute(select(self.model))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, obj_in: dict[str, Any]) -> ModelType:
        """Create a new record.

        The flush emits a single INSERT that hands back the generated
        primary key, which is then available on the returned object.
        """
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        await db.flush()
        return db_obj

    async def update(self, db: AsyncSession, id: int, obj_in: dict[str, Any]) -> int:
        """Overwrite the given fields of a record and return the affected-row count.

        A missing record is not an error; the count is simply 0.
        """
        statement = (
            update(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .values(**obj_in)
        )
        result = await db.execute(statement)
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, db: AsyncSession, id: int) -> int:
        """Delete a record and return the affected-row count (0 if absent)."""
        statement = delete(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        result = await db.execute(statement)
        return result.rowcount  # type: ignore[attr-defined]
