"""Cross-record rules: uniqueness collisions and partial-update merge."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel

from inventoryctl.domain.entities import Record


def supplied_fields(request: BaseModel) -> dict[str, Any]:
    """Fields the caller actually supplied on an update request.

    A field counts as supplied when it was set and is not ``None``.
    Explicit zero values are supplied values.
    """
    return request.model_dump(exclude_unset=True, exclude_none=True)


def find_collision[E: Record](
    records: Iterable[E],
    key: Callable[[E], Any],
    value: Any,
    *,
    exclude_id: int | None = None,
) -> E | None:
    """Return the first record whose uniqueness key equals *value*.

    Comparison is exact equality (case-sensitive for strings). The record
    with ``id == exclude_id`` is skipped so an update may resubmit its own
    value.
    """
    for record in records:
        if exclude_id is not None and record.id == exclude_id:
            continue
        if key(record) == value:
            return record
    return None


def apply_partial_update[E: Record](existing: E, request: BaseModel) -> E:
    """Merge the supplied fields of *request* over *existing*.

    Fields not supplied keep their stored values. The id is never changed.
    """
    changes = supplied_fields(request)
    changes.pop("id", None)
    merged = {**existing.model_dump(), **changes}
    return type(existing).model_validate(merged)
