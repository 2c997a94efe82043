"""
Record store: persistence boundary for Employee, Payroll and History.

The store never validates; callers run the validation layer first.
Every SQLAlchemy fault is rolled back, logged and raised as PersistenceError.
"""
import logging
import uuid
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payroll_api.core.database import Base
from payroll_api.core.exceptions import PersistenceError
from payroll_api.models.history import History

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def parse_id(value) -> uuid.UUID | None:
    """Returns the UUID for ``value``, or None if it cannot name any record."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class RecordStore(Generic[ModelT]):

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    async def _fail(self, action: str, exc: SQLAlchemyError) -> PersistenceError:
        await self.db.rollback()
        logger.error("Failed to %s %s: %s", action, self.model.__tablename__, exc, exc_info=exc)
        return PersistenceError(f"Failed to {action} {self.model.__tablename__}")

    async def create(self, entity: ModelT) -> ModelT:
        """Persists ``entity``; id and timestamps are filled in on return."""
        self.db.add(entity)
        try:
            await self.db.commit()
            await self.db.refresh(entity)
        except SQLAlchemyError as exc:
            raise await self._fail("save", exc) from exc
        return entity

    async def get(self, entity_id) -> ModelT | None:
        key = parse_id(entity_id)
        if key is None:
            return None
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == key))
        except SQLAlchemyError as exc:
            raise await self._fail("load", exc) from exc
        return result.scalar_one_or_none()

    async def list_all(self) -> list[ModelT]:
        """All records in insertion order."""
        try:
            result = await self.db.execute(
                select(self.model).order_by(self.model.created_at, self.model.seq)
            )
        except SQLAlchemyError as exc:
            raise await self._fail("fetch", exc) from exc
        return list(result.scalars().all())


class HistoryStore(RecordStore[History]):

    def __init__(self, db: AsyncSession):
        super().__init__(db, History)

    async def list_by_employee(self, employee_id) -> list[History]:
        """History rows of one employee, newest first."""
        key = parse_id(employee_id)
        if key is None:
            return []
        try:
            result = await self.db.execute(
                select(History)
                .where(History.employee_id == key)
                .order_by(History.created_at.desc(), History.seq.desc())
            )
        except SQLAlchemyError as exc:
            raise await self._fail("fetch", exc) from exc
        return list(result.scalars().all())
