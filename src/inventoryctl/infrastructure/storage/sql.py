"""SQL-backed StoragePort over SQLAlchemy Core.

Each store wraps one table. Rows map straight onto the record model
(column names equal field names). Database errors are translated into the
storage exception taxonomy so nothing SQLAlchemy-specific leaks upward.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from inventoryctl.domain.entities import INT_MAX, Record
from inventoryctl.infrastructure.storage.errors import (
    DuplicateRecordError,
    RecordNotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)


class SqlStore[E: Record]:
    """Store for one entity type backed by one table."""

    def __init__(self, engine: Engine, table: Table, model: type[E], *, kind: str) -> None:
        self._engine = engine
        self._table = table
        self._model = model
        self._kind = kind

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            logger.debug("Integrity error during %s %s", action, self._kind, exc_info=True)
            msg = f"{self._kind} {action} rejected by uniqueness constraint: {exc.orig}"
            raise DuplicateRecordError(msg) from exc
        except SQLAlchemyError as exc:
            logger.warning("Storage failure during %s %s: %s", action, self._kind, exc)
            raise StorageError(f"{self._kind} {action} failed: {exc}") from exc
        except OverflowError as exc:
            logger.warning("Value out of range during %s %s: %s", action, self._kind, exc)
            raise StorageError(f"{self._kind} {action} failed: {exc}") from exc

    def _check_id(self, record_id: int) -> None:
        # No row can hold an id outside the column range.
        if not -INT_MAX - 1 <= record_id <= INT_MAX:
            raise RecordNotFoundError(self._kind, record_id)

    def get_all(self) -> list[E]:
        stmt = select(self._table).order_by(self._table.c.id)
        with self._translate_errors("read"), self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._model.model_validate(dict(row)) for row in rows]

    def get_by_id(self, record_id: int) -> E:
        self._check_id(record_id)
        stmt = select(self._table).where(self._table.c.id == record_id)
        with self._translate_errors("read"), self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            raise RecordNotFoundError(self._kind, record_id)
        return self._model.model_validate(dict(row))

    def create(self, record: E) -> E:
        with self._translate_errors("create"), self._engine.begin() as conn:
            conn.execute(insert(self._table).values(**record.model_dump()))
        return record

    def update(self, record_id: int, record: E) -> E:
        self._check_id(record_id)
        values = record.model_dump(exclude={"id"})
        stmt = update(self._table).where(self._table.c.id == record_id).values(**values)
        with self._translate_errors("update"), self._engine.begin() as conn:
            rowcount = conn.execute(stmt).rowcount
        if rowcount == 0:
            raise RecordNotFoundError(self._kind, record_id)
        return record.model_copy(update={"id": record_id})

    def delete(self, record_id: int) -> None:
        self._check_id(record_id)
        stmt = delete(self._table).where(self._table.c.id == record_id)
        with self._translate_errors("delete"), self._engine.begin() as conn:
            rowcount = conn.execute(stmt).rowcount
        if rowcount == 0:
            raise RecordNotFoundError(self._kind, record_id)

    def last_id(self) -> int:
        stmt = select(func.max(self._table.c.id))
        with self._translate_errors("read"), self._engine.connect() as conn:
            value = conn.execute(stmt).scalar()
        return int(value or 0)
