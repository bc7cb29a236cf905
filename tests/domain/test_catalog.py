"""Tests for the entity catalog."""

import pytest

from inventoryctl.domain.catalog import DEFINITIONS, EMPLOYEE, PRODUCT, SECTION, get_definition
from inventoryctl.domain.entities import (
    Employee,
    EmployeeCreate,
    ProductCreate,
    SectionCreate,
)
from inventoryctl.domain.types import EntityKind
from tests.conftest import PRODUCT_PAYLOAD, SECTION_PAYLOAD


class TestDefinitions:
    def test_one_per_kind(self) -> None:
        assert set(DEFINITIONS) == set(EntityKind)

    @pytest.mark.parametrize(
        ("definition", "field"),
        [
            (EMPLOYEE, "card_number_id"),
            (SECTION, "section_number"),
            (PRODUCT, "product_code"),
        ],
    )
    def test_unique_field(self, definition, field: str) -> None:
        assert definition.unique_field == field
        assert field in definition.model.model_fields
        assert field in definition.create_model.model_fields
        assert field in definition.update_model.model_fields

    def test_plural(self) -> None:
        assert EMPLOYEE.plural == "employees"

    def test_unique_key_reads_requests_and_records(self) -> None:
        request = EmployeeCreate(
            card_number_id="AAA111222", first_name="Ana", last_name="Souza", warehouse_id=1
        )
        assert EMPLOYEE.unique_key(request) == "AAA111222"
        assert SECTION.unique_key(SectionCreate(**SECTION_PAYLOAD)) == 2


class TestBuild:
    def test_employee(self) -> None:
        request = EmployeeCreate(
            card_number_id="AAA111222", first_name="Ana", last_name="Souza", warehouse_id=1
        )
        record = EMPLOYEE.build(4, request)
        assert isinstance(record, Employee)
        assert record.id == 4
        assert record.card_number_id == "AAA111222"

    def test_product_carries_every_field(self) -> None:
        record = PRODUCT.build(1, ProductCreate(**PRODUCT_PAYLOAD))
        assert record.model_dump() == {"id": 1, **PRODUCT_PAYLOAD}


class TestGetDefinition:
    def test_by_name(self) -> None:
        assert get_definition("section") is SECTION

    def test_by_kind(self) -> None:
        assert get_definition(EntityKind.PRODUCT) is PRODUCT

    def test_unknown_kind(self) -> None:
        with pytest.raises(KeyError, match="Unknown entity kind"):
            get_definition("warehouse")
