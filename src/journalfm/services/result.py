"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult; expected
failures (unreadable files, unknown kinds) are reported in ``error``
rather than raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"show"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues, such as skipped files.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
