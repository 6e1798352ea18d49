"""
Error classification for catgql.

Every failure a client can cause is a `CatalogError`. The executor catches
them at its boundary and turns them into a 400 response; `ErrorInfo` is the
structured form used when logging them.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Standardized error categories."""

    MALFORMED_REQUEST = "malformed_request"   # Body missing, unparseable or incomplete
    UNKNOWN_OPERATION = "unknown_operation"   # operationName not recognized
    NOT_FOUND = "not_found"                   # No route for method + path
    INTERNAL = "internal"                     # Unexpected server-side failure


class ErrorInfo(BaseModel):
    """
    Standardized error object for log records.
    """

    kind: ErrorKind = Field(
        default=ErrorKind.INTERNAL,
        description="Error category"
    )
    code: str = Field(
        default="INTERNAL",
        description="Stable error code (MALFORMED_REQUEST, UNKNOWN_OPERATION, ...)"
    )
    message: str = Field(
        default="Internal error",
        description="Human-readable error message"
    )
    http_status: int = Field(
        default=500,
        description="HTTP status the error maps to"
    )
    exception_type: Optional[str] = Field(
        None, description="Python exception class name"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Optional extra context"
    )

    def to_dict(self) -> dict[str, Any]:
        d = {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
            "http_status": self.http_status,
        }
        if self.exception_type is not None:
            d["exception_type"] = self.exception_type
        if self.details:
            d["details"] = self.details
        return d


class CatalogError(Exception):
    """Base class for client-caused failures."""

    kind: ErrorKind = ErrorKind.INTERNAL
    http_status: int = 500

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_error_info(self) -> ErrorInfo:
        return ErrorInfo(
            kind=self.kind,
            code=self.kind.name,
            message=self.message,
            http_status=self.http_status,
            exception_type=type(self).__name__,
            details=self.details,
        )


class MalformedRequest(CatalogError):
    kind = ErrorKind.MALFORMED_REQUEST
    http_status = 400


class UnknownOperation(CatalogError):
    kind = ErrorKind.UNKNOWN_OPERATION
    http_status = 400

    def __init__(self, operation_name: str):
        super().__init__(f"Unknown operation: {operation_name}", operation_name=operation_name)
        self.operation_name = operation_name


class RouteNotFound(CatalogError):
    kind = ErrorKind.NOT_FOUND
    http_status = 404

    def __init__(self, method: str, path: str):
        super().__init__("Not Found", method=method, path=path)


def classify_exception(exc: Exception) -> ErrorInfo:
    """Classify any exception into an ErrorInfo."""
    if isinstance(exc, CatalogError):
        return exc.to_error_info()
    return ErrorInfo(
        kind=ErrorKind.INTERNAL,
        code="INTERNAL",
        message=str(exc) or type(exc).__name__,
        http_status=500,
        exception_type=type(exc).__name__,
    )
