"""Shared helpers for adapters that feed requests into services."""

from __future__ import annotations

from pydantic import ValidationError

from inventoryctl.services.result import ErrorCode, ServiceResult


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line.

    Examples:
        ``card_number_id: String should have at least 9 characters``
    """
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validation_failure(op: str, exc: ValidationError) -> ServiceResult:
    """Adapter-side pre-validation failure, shaped like a service result."""
    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    return ServiceResult.failure(
        op,
        ErrorCode.VALIDATION_FAILED,
        describe_validation_error(exc),
        fields=fields,
    )

