"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Every service-layer method returns a ServiceResult; action
errors are converted to ``ok=False`` results, never raised past the
service boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload.

    Attributes:
        code: Stable machine-readable code (e.g. ``"VALIDATION_FAILED"``).
        message: Human-readable summary.
        detail: Code-specific payload, such as the validation error tree.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"run_action"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues (e.g. a failing plugin hook).
        error: Structured error when ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
            warnings=warnings or [],
        )
