"""Mapping from service error codes to HTTP status codes."""

from __future__ import annotations

from http import HTTPStatus

from inventoryctl.services.result import ErrorCode, ServiceResult

ERROR_STATUS: dict[str, HTTPStatus] = {
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.CONFLICT: HTTPStatus.CONFLICT,
    ErrorCode.VALIDATION_FAILED: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorCode.STORAGE_FAILURE: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(result: ServiceResult, *, success: HTTPStatus = HTTPStatus.OK) -> HTTPStatus:
    """HTTP status for *result*: *success* when ok, else mapped from the error code.

    Unknown error codes map to 500.
    """
    if result.ok:
        return success
    code = result.error.code if result.error else ErrorCode.STORAGE_FAILURE
    return ERROR_STATUS.get(code, HTTPStatus.INTERNAL_SERVER_ERROR)
