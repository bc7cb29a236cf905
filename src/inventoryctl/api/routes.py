"""Blueprint factory: five REST endpoints per entity service.

    GET    /api/v1/<plural>         list      200
    GET    /api/v1/<plural>/<id>    get       200
    POST   /api/v1/<plural>         create    201
    PATCH  /api/v1/<plural>/<id>    update    200
    DELETE /api/v1/<plural>/<id>    delete    204

Bodies are decoded and pre-validated here (400 for unparseable input,
422 for field errors) before the service is called.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from inventoryctl.api.status import status_for
from inventoryctl.domain.entities import INT_MAX
from inventoryctl.services._helpers import validation_failure
from inventoryctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from inventoryctl.services.entity import EntityService


def respond(
    result: ServiceResult, *, success: HTTPStatus = HTTPStatus.OK
) -> tuple[Response, HTTPStatus]:
    """Turn a ServiceResult into a JSON response and status."""
    status = status_for(result, success=success)
    if not result.ok:
        err = result.error
        return jsonify(
            {
                "error": err.message if err else "Unknown error",
                "code": err.code if err else ErrorCode.STORAGE_FAILURE.value,
            }
        ), status
    if status == HTTPStatus.NO_CONTENT:
        return Response(status=status), status
    payload: Any = result.data
    if result.op.startswith("list_"):
        payload = result.data.get("items", [])
    return jsonify({"data": payload}), status


def _bad_request(op: str, message: str) -> tuple[Response, HTTPStatus]:
    return respond(ServiceResult.failure(op, ErrorCode.BAD_REQUEST, message))


def _parse_id(raw: str) -> int | None:
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if abs(value) <= INT_MAX else None


def _json_body() -> dict[str, Any] | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


def build_blueprint(service: EntityService[Any, Any, Any]) -> Blueprint:
    """Build the blueprint serving *service* under ``/api/v1/<plural>``."""
    definition = service.definition
    kind = definition.kind.value
    bp = Blueprint(f"{definition.plural}_api", __name__, url_prefix=f"/api/v1/{definition.plural}")

    @bp.get("")
    def list_records() -> tuple[Response, HTTPStatus]:
        return respond(service.list_all())

    @bp.get("/<record_id>")
    def get_record(record_id: str) -> tuple[Response, HTTPStatus]:
        parsed = _parse_id(record_id)
        if parsed is None:
            return _bad_request(f"get_{kind}", "invalid ID")
        return respond(service.get(parsed))

    @bp.post("")
    def create_record() -> tuple[Response, HTTPStatus]:
        op = f"create_{kind}"
        body = _json_body()
        if body is None:
            return _bad_request(op, "request body must be a JSON object")
        try:
            payload = definition.create_model.model_validate(body)
        except ValidationError as exc:
            return respond(validation_failure(op, exc))
        return respond(service.create(payload), success=HTTPStatus.CREATED)

    @bp.patch("/<record_id>")
    def update_record(record_id: str) -> tuple[Response, HTTPStatus]:
        op = f"update_{kind}"
        parsed = _parse_id(record_id)
        if parsed is None:
            return _bad_request(op, "invalid ID")
        body = _json_body()
        if body is None:
            return _bad_request(op, "request body must be a JSON object")
        try:
            payload = definition.update_model.model_validate(body)
        except ValidationError as exc:
            return respond(validation_failure(op, exc))
        return respond(service.update(parsed, payload))

    @bp.delete("/<record_id>")
    def delete_record(record_id: str) -> tuple[Response, HTTPStatus]:
        parsed = _parse_id(record_id)
        if parsed is None:
            return _bad_request(f"delete_{kind}", "invalid ID")
        return respond(service.delete(parsed), success=HTTPStatus.NO_CONTENT)

    return bp
