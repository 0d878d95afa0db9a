"""ServiceResult and ServiceError — what every CLI-facing operation returns.

INVARIANT: PickerService methods return ServiceResult and never raise for an
expected outcome. Validation failures and unknown identifiers become
``ok=False`` results with a stable error code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

VALIDATION_FAILED = "VALIDATION_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"validate_range"``).
        data: Operation-specific payload.
        warnings: Non-fatal notes, such as a DST gap being resolved.
        error: Structured error if ``ok`` is False.
        meta: Optional extras (zone used, comparison frame).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any] | None = None,
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data or {}, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, data=data or {}, error=error)
