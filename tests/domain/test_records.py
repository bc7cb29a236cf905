"""Tests for uniqueness collisions and partial-update merge."""

from __future__ import annotations

from operator import attrgetter

from inventoryctl.domain.entities import EmployeeUpdate, SectionUpdate
from inventoryctl.domain.records import apply_partial_update, find_collision, supplied_fields
from tests.conftest import make_employee, make_section

_card = attrgetter("card_number_id")


class TestSuppliedFields:
    def test_only_set_fields(self) -> None:
        request = EmployeeUpdate(first_name="New")
        assert supplied_fields(request) == {"first_name": "New"}

    def test_explicit_none_is_not_supplied(self) -> None:
        request = EmployeeUpdate.model_validate({"first_name": None, "last_name": "Lima"})
        assert supplied_fields(request) == {"last_name": "Lima"}

    def test_zero_is_supplied(self) -> None:
        request = SectionUpdate(current_capacity=0, current_temperature=0.0)
        assert supplied_fields(request) == {"current_capacity": 0, "current_temperature": 0.0}

    def test_empty_request(self) -> None:
        assert supplied_fields(EmployeeUpdate()) == {}


class TestFindCollision:
    def test_match(self) -> None:
        records = [make_employee(1, "AAA111222"), make_employee(2, "BBB333444")]
        clash = find_collision(records, _card, "BBB333444")
        assert clash is not None
        assert clash.id == 2

    def test_no_match(self) -> None:
        records = [make_employee(1, "AAA111222")]
        assert find_collision(records, _card, "CCC555666") is None

    def test_empty_collection(self) -> None:
        assert find_collision([], _card, "AAA111222") is None

    def test_case_sensitive(self) -> None:
        records = [make_employee(1, "AAA111222")]
        assert find_collision(records, _card, "aaa111222") is None

    def test_excluded_record_skipped(self) -> None:
        records = [make_employee(1, "AAA111222")]
        assert find_collision(records, _card, "AAA111222", exclude_id=1) is None

    def test_exclusion_does_not_hide_others(self) -> None:
        records = [make_employee(1, "AAA111222"), make_employee(2, "BBB333444")]
        clash = find_collision(records, _card, "BBB333444", exclude_id=1)
        assert clash is not None
        assert clash.id == 2

    def test_integer_key(self) -> None:
        records = [make_section(1, 10), make_section(2, 20)]
        clash = find_collision(records, attrgetter("section_number"), 20)
        assert clash is not None
        assert clash.id == 2


class TestApplyPartialUpdate:
    def test_supplied_field_overwrites(self) -> None:
        existing = make_employee(1, "AAA111222", first_name="Ana")
        merged = apply_partial_update(existing, EmployeeUpdate(first_name="New"))
        assert merged.first_name == "New"

    def test_omitted_fields_unchanged(self) -> None:
        existing = make_employee(1, "AAA111222", last_name="Souza", warehouse_id=3)
        merged = apply_partial_update(existing, EmployeeUpdate(first_name="New"))
        assert merged.card_number_id == "AAA111222"
        assert merged.last_name == "Souza"
        assert merged.warehouse_id == 3

    def test_id_preserved(self) -> None:
        existing = make_employee(5, "AAA111222")
        merged = apply_partial_update(existing, EmployeeUpdate(card_number_id="ZZZ999888"))
        assert merged.id == 5
        assert merged.card_number_id == "ZZZ999888"

    def test_zero_applies(self) -> None:
        existing = make_section(1, 10, current_capacity=25, current_temperature=4.0)
        merged = apply_partial_update(
            existing, SectionUpdate(current_capacity=0, current_temperature=0.0)
        )
        assert merged.current_capacity == 0
        assert merged.current_temperature == 0.0

    def test_empty_update_is_identity(self) -> None:
        existing = make_employee(1, "AAA111222")
        assert apply_partial_update(existing, EmployeeUpdate()) == existing

    def test_returns_new_instance(self) -> None:
        existing = make_employee(1, "AAA111222", first_name="Ana")
        apply_partial_update(existing, EmployeeUpdate(first_name="New"))
        assert existing.first_name == "Ana"
