"""Tests for Rich renderers."""

from inventoryctl.output.renderers import render_quiet, render_result
from inventoryctl.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("create_employee", "CONFLICT", "card_number_id taken"))
        assert "ERROR" in output
        assert "create_employee" in output
        assert "card_number_id taken" in output
        assert "code: CONFLICT" in output

    def test_detail_only_when_verbose(self) -> None:
        result = _err("update_employee", "NOT_FOUND", "missing", id=9)
        assert "detail" not in render_result(result)
        verbose = render_result(result, verbose=True)
        assert "detail" in verbose
        assert "id: 9" in verbose

    def test_no_error_object(self) -> None:
        assert "Unknown error" in render_result(ServiceResult(ok=False, op="get_section"))


class TestRecordRenderer:
    def test_key_values(self) -> None:
        output = render_result(_ok("get_employee", id=1, card_number_id="AAA111222"))
        assert "OK" in output
        assert "get_employee" in output
        assert "id: 1" in output
        assert "card_number_id: AAA111222" in output

    def test_delete(self) -> None:
        output = render_result(_ok("delete_product", id=4))
        assert "delete_product" in output
        assert "id: 4" in output


class TestTableRenderer:
    def test_rows_and_count(self) -> None:
        items = [
            {"id": 1, "card_number_id": "AAA111222"},
            {"id": 2, "card_number_id": "BBB333444"},
        ]
        output = render_result(_ok("list_employees", count=2, items=items))
        assert "Card Number Id" in output
        assert "AAA111222" in output
        assert "BBB333444" in output
        assert "2 record(s)" in output

    def test_empty(self) -> None:
        output = render_result(_ok("list_sections", count=0, items=[]))
        assert "(no records)" in output


class TestMetaRenderer:
    def test_span_tree_when_verbose(self) -> None:
        telemetry = {
            "name": "EntityService.create",
            "duration_ms": 1.5,
            "annotations": {"record_id": 2},
            "children": [{"name": "storage.get_all", "duration_ms": 0.4}],
        }
        result = ServiceResult(
            ok=True, op="create_employee", data={"id": 2}, meta={"telemetry": telemetry}
        )
        assert "storage.get_all" not in render_result(result)
        output = render_result(result, verbose=True)
        assert "EntityService.create" in output
        assert "storage.get_all" in output
        assert "record_id=2" in output


class TestQuiet:
    def test_list_ids(self) -> None:
        result = _ok("list_employees", count=2, items=[{"id": 1}, {"id": 3}])
        assert render_quiet(result) == "1\n3"

    def test_single_id(self) -> None:
        assert render_quiet(_ok("create_section", id=5, section_number=10)) == "5"

    def test_no_id(self) -> None:
        assert render_quiet(_ok("init", backend="memory")) == "OK: init"

    def test_error(self) -> None:
        result = _err("get_product", "NOT_FOUND", "No product found with ID: 2")
        assert render_quiet(result) == "ERROR: get_product — No product found with ID: 2"
