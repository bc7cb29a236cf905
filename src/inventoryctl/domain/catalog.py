"""Entity catalog — one definition per managed record type.

A definition bundles everything the generic service and the adapters need
to handle an entity: its record and request models, the name of its
uniqueness field, and the merge used for partial updates.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from pydantic import BaseModel

from inventoryctl.domain.entities import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    Product,
    ProductCreate,
    ProductUpdate,
    Record,
    Section,
    SectionCreate,
    SectionUpdate,
)
from inventoryctl.domain.records import apply_partial_update
from inventoryctl.domain.types import EntityKind


@dataclass(frozen=True)
class EntityDefinition[E: Record, C: BaseModel, U: BaseModel]:
    """Static description of one entity type."""

    kind: EntityKind
    model: type[E]
    create_model: type[C]
    update_model: type[U]
    unique_field: str
    merge: Callable[[E, U], E] = apply_partial_update

    @property
    def plural(self) -> str:
        return self.kind.plural

    @property
    def unique_key(self) -> Callable[[Any], Any]:
        """Accessor for the uniqueness field on records and requests alike."""
        return attrgetter(self.unique_field)

    def build(self, record_id: int, request: C) -> E:
        """Assemble a full record from a creation request and an allocated id."""
        return self.model(id=record_id, **request.model_dump())


EMPLOYEE: EntityDefinition[Employee, EmployeeCreate, EmployeeUpdate] = EntityDefinition(
    kind=EntityKind.EMPLOYEE,
    model=Employee,
    create_model=EmployeeCreate,
    update_model=EmployeeUpdate,
    unique_field="card_number_id",
)

SECTION: EntityDefinition[Section, SectionCreate, SectionUpdate] = EntityDefinition(
    kind=EntityKind.SECTION,
    model=Section,
    create_model=SectionCreate,
    update_model=SectionUpdate,
    unique_field="section_number",
)

PRODUCT: EntityDefinition[Product, ProductCreate, ProductUpdate] = EntityDefinition(
    kind=EntityKind.PRODUCT,
    model=Product,
    create_model=ProductCreate,
    update_model=ProductUpdate,
    unique_field="product_code",
)

DEFINITIONS: dict[EntityKind, EntityDefinition[Any, Any, Any]] = {
    d.kind: d for d in (EMPLOYEE, SECTION, PRODUCT)
}


def get_definition(kind: str) -> EntityDefinition[Any, Any, Any]:
    """Look up a definition by kind name.

    Raises:
        KeyError: If *kind* is not a managed entity type.
    """
    try:
        return DEFINITIONS[EntityKind(kind)]
    except ValueError:
        msg = f"Unknown entity kind: {kind!r}. Expected one of {sorted(DEFINITIONS)}"
        raise KeyError(msg) from None
