"""ServiceResult and ServiceError — the contract between services and the CLI.

The resolvers themselves return plain values and raise on misuse; services
that front them for the CLI or other adapters wrap outcomes in
ServiceResult so failures become data instead of tracebacks.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from fluentlink.domain.errors import (
    ContextStackUnderflowError,
    FluentError,
    InvalidConfigurationError,
    LocaleNotFoundError,
    ParentLinkUnavailableError,
)

ERROR_CODES: dict[type[FluentError], str] = {
    LocaleNotFoundError: "LOCALE_NOT_FOUND",
    InvalidConfigurationError: "INVALID_CONFIGURATION",
    ContextStackUnderflowError: "CONTEXT_UNDERFLOW",
    ParentLinkUnavailableError: "PARENT_LINK_UNAVAILABLE",
}


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: FluentError) -> ServiceError:
        code = next(
            (c for kind, c in ERROR_CODES.items() if isinstance(exc, kind)),
            "FLUENT_ERROR",
        )
        detail: dict[str, Any] = {}
        if isinstance(exc, LocaleNotFoundError):
            detail["locale"] = exc.code
        return cls(code=code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Return type for adapter-facing service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"resolve_link"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: FluentError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
