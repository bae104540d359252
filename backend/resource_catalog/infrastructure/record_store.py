"""SQL Record Store - RecordStore implementation over an AsyncSession, one per model.

Invariants:
    - The only component that issues SQL for catalog resources
    - find_by_id returns None when absent (session.get semantics)
    - save commits per call; on failure the session is rolled back, no partial row
    - IntegrityError on save -> PersistenceConflictError (duplicate natural key, etc.)
    - Any other SQLAlchemy failure -> DatabaseError (503), after rollback
    - No ordering applied to find_all: store-native order

Design Decisions:
    - session.add + commit handles both insert (transient record) and full
      replacement (record loaded by find_by_id in the same session)
    - refresh after commit so generated keys and server defaults are returned
"""

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_catalog.core.errors import DatabaseError, PersistenceConflictError
from resource_catalog.db.base import Base
from resource_catalog.infrastructure.database import map_database_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class SqlRecordStore(Generic[ModelT]):
    """Pass-through persistence for a single resource table."""

    def __init__(self, db: AsyncSession, model: type[ModelT], resource_name: str):
        self._db = db
        self._model = model
        self._resource_name = resource_name

    async def find_all(self) -> Sequence[ModelT]:
        try:
            result = await self._db.execute(select(self._model))
        except SQLAlchemyError as e:
            raise await self._failed(e) from e
        return result.scalars().all()

    async def find_by_id(self, key: int | str) -> ModelT | None:
        try:
            return await self._db.get(self._model, key)
        except SQLAlchemyError as e:
            raise await self._failed(e) from e

    async def save(self, record: ModelT) -> ModelT:
        self._db.add(record)
        try:
            await self._db.commit()
            await self._db.refresh(record)
        except IntegrityError as e:
            await self._db.rollback()
            logger.warning(
                f"Constraint violation saving {self._resource_name}: {e.orig}",
                extra={"resource": self._resource_name},
            )
            raise PersistenceConflictError(self._resource_name) from e
        except SQLAlchemyError as e:
            raise await self._failed(e) from e
        return record

    async def delete(self, record: ModelT) -> None:
        try:
            await self._db.delete(record)
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._failed(e) from e

    async def _failed(self, exc: SQLAlchemyError) -> DatabaseError:
        await self._db.rollback()
        error = map_database_error(exc)
        error.context.resource = self._resource_name
        return error
