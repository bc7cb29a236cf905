"""EntityService — CRUD with uniqueness, ID allocation, and partial updates.

One generic service serves every entity type; the per-type differences
(record model, uniqueness field, merge) come from an
:class:`~inventoryctl.domain.catalog.EntityDefinition`.

Create:  READ ALL → CHECK UNIQUE → LAST ID → BUILD → WRITE
Update:  READ ALL → LOCATE → CHECK UNIQUE (others) → MERGE → WRITE

The first failure aborts the pipeline; no later storage call is made.
Without ``serialize_writes`` the read and the write are not atomic, so two
concurrent creates with the same uniqueness value can both pass the check.
The store's own consistency check is then the last line.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from inventoryctl.domain.catalog import EntityDefinition
from inventoryctl.domain.entities import Record
from inventoryctl.domain.ids import next_id
from inventoryctl.domain.records import find_collision, supplied_fields
from inventoryctl.infrastructure.storage.errors import StorageError
from inventoryctl.infrastructure.storage.ports import StoragePort
from inventoryctl.services.base import BaseService
from inventoryctl.services.result import ErrorCode, ServiceResult
from inventoryctl.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)


class EntityService[E: Record, C: BaseModel, U: BaseModel](BaseService):
    """Domain service for one entity type."""

    def __init__(
        self,
        definition: EntityDefinition[E, C, U],
        store: StoragePort[E],
        *,
        serialize_writes: bool = False,
    ) -> None:
        super().__init__(store, serialize_writes=serialize_writes)
        self._definition = definition

    @property
    def definition(self) -> EntityDefinition[E, C, U]:
        return self._definition

    def _op(self, verb: str) -> str:
        if verb == "list":
            return f"list_{self._definition.plural}"
        return f"{verb}_{self._definition.kind}"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @traced
    def list_all(self) -> ServiceResult:
        """Return every record of this entity type."""
        op = self._op("list")
        try:
            with trace_span("storage.get_all"):
                records = self._store.get_all()
        except StorageError as exc:
            return self._storage_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"count": len(records), "items": [r.model_dump() for r in records]},
        )

    @traced
    def get(self, record_id: int) -> ServiceResult:
        """Return one record by id."""
        op = self._op("get")
        try:
            with trace_span("storage.get_by_id"):
                record = self._store.get_by_id(record_id)
        except StorageError as exc:
            return self._storage_failure(op, exc)

        return ServiceResult(ok=True, op=op, data=record.model_dump())

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @traced
    def create(self, request: C) -> ServiceResult:
        """Create a record with a freshly allocated id."""
        op = self._op("create")
        unique_key = self._definition.unique_key

        with self._write_guard():
            try:
                with trace_span("storage.get_all"):
                    records = self._store.get_all()
            except StorageError as exc:
                return self._storage_failure(op, exc)

            value = unique_key(request)
            clash = find_collision(records, unique_key, value)
            if clash is not None:
                return self._conflict(op, value, clash)

            try:
                with trace_span("storage.last_id"):
                    last_id = self._store.last_id()
            except StorageError as exc:
                return self._storage_failure(op, exc)

            candidate = self._definition.build(next_id(last_id), request)

            try:
                with trace_span("storage.create"):
                    stored = self._store.create(candidate)
            except StorageError as exc:
                return self._storage_failure(op, exc)

        logger.debug("Created %s %d", self._definition.kind, stored.id)
        self._annotate(record_id=stored.id)
        return ServiceResult(ok=True, op=op, data=stored.model_dump())

    @traced
    def update(self, record_id: int, request: U) -> ServiceResult:
        """Apply a partial update to an existing record.

        Only the fields supplied by *request* change; the rest keep their
        stored values.
        """
        op = self._op("update")
        unique_key = self._definition.unique_key
        changes = supplied_fields(request)

        with self._write_guard():
            try:
                with trace_span("storage.get_all"):
                    records = self._store.get_all()
            except StorageError as exc:
                return self._storage_failure(op, exc)

            current = next((r for r in records if r.id == record_id), None)
            if current is None:
                return self._not_found(op, record_id)

            if self._definition.unique_field in changes:
                value = unique_key(request)
                clash = find_collision(records, unique_key, value, exclude_id=record_id)
                if clash is not None:
                    return self._conflict(op, value, clash)

            merged = self._definition.merge(current, request)

            try:
                with trace_span("storage.update"):
                    stored = self._store.update(record_id, merged)
            except StorageError as exc:
                return self._storage_failure(op, exc)

        logger.debug("Updated %s %d: %s", self._definition.kind, record_id, sorted(changes))
        self._annotate(record_id=record_id, fields=sorted(changes))
        return ServiceResult(ok=True, op=op, data=stored.model_dump())

    @traced
    def delete(self, record_id: int) -> ServiceResult:
        """Remove a record permanently."""
        op = self._op("delete")
        with self._write_guard():
            try:
                with trace_span("storage.delete"):
                    self._store.delete(record_id)
            except StorageError as exc:
                return self._storage_failure(op, exc)

        logger.debug("Deleted %s %d", self._definition.kind, record_id)
        return ServiceResult(ok=True, op=op, data={"id": record_id})

    # ------------------------------------------------------------------
    # Failures
    # ------------------------------------------------------------------

    def _conflict(self, op: str, value: Any, clash: E) -> ServiceResult:
        field_name = self._definition.unique_field
        return ServiceResult.failure(
            op,
            ErrorCode.CONFLICT,
            f"{field_name} {value!r} is already registered",
            field=field_name,
            value=value,
            existing_id=clash.id,
        )

    def _not_found(self, op: str, record_id: int) -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.NOT_FOUND,
            f"No {self._definition.kind} found with ID: {record_id}",
            id=record_id,
        )

    def _annotate(self, **values: Any) -> None:
        span = get_current_span()
        if span is None:
            return
        for key, value in values.items():
            span.annotate(key, value)
