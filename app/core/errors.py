from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException


class DomainError(Exception):
    """Base class for failures raised by the project core."""


class InvalidArgument(DomainError, ValueError):
    """A required argument (user, project, role name) was missing or malformed."""


class NotFound(DomainError, LookupError):
    """A referenced client, project, ticket or work unit does not exist."""

    def __init__(self, kind: str, ident: object) -> None:
        super().__init__(f"{kind} {ident} not found")
        self.kind = kind
        self.ident = ident


class InvalidTransition(DomainError):
    """A state change that the domain forbids, e.g. un-invoicing a work unit."""


class ErrorEnvelope(JSONResponse):
    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        details: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        payload: dict[str, Any] = {"code": code, "message": message}
        if details is not None:
            payload["details"] = details
        super().__init__(payload, status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    message = detail if isinstance(detail, str) else "Error"
    details = detail if isinstance(detail, dict) else None
    return ErrorEnvelope(
        status_code=exc.status_code,
        code="http_error",
        message=message,
        details=details,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc):  # type: ignore[override]
    from fastapi.exceptions import RequestValidationError

    if isinstance(exc, RequestValidationError):
        return ErrorEnvelope(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            code="validation_error",
            message="Validation failed",
            details={"errors": exc.errors()},
        )
    raise exc


async def domain_exception_handler(request: Request, exc: DomainError):
    if isinstance(exc, NotFound):
        return ErrorEnvelope(
            status_code=status.HTTP_404_NOT_FOUND,
            code="not_found",
            message=str(exc),
            details={"kind": exc.kind, "id": str(exc.ident)},
        )
    if isinstance(exc, InvalidTransition):
        return ErrorEnvelope(status_code=status.HTTP_409_CONFLICT, code="invalid_transition", message=str(exc))
    return ErrorEnvelope(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        code="invalid_argument",
        message=str(exc) or "Invalid argument",
    )


__all__ = [
    "DomainError",
    "ErrorEnvelope",
    "InvalidArgument",
    "InvalidTransition",
    "NotFound",
    "domain_exception_handler",
    "http_exception_handler",
    "validation_exception_handler",
]
