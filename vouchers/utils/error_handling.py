"""
Error types for the voucher service.

Policy violations (duplicate code, out-of-range discount, unknown voucher)
are raised as VoucherError subclasses whose ``type`` and ``message`` form the
failure result handed back to callers. Storage faults raise RepositoryError.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Severity attached to application errors."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Failure kinds reported to callers of the voucher service."""

    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"


# HTTP status the outer web layer should answer with for each failure kind
HTTP_STATUS_BY_KIND = {
    ErrorKind.CONFLICT: 409,
    ErrorKind.BAD_REQUEST: 400,
}


class AppError(Exception):
    """Base class for all application errors."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary for logging."""
        error_dict = {
            "error_type": type(self).__name__,
            "message": self.message,
            "severity": self.severity.value,
        }
        if self.cause is not None:
            error_dict["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return error_dict


class RepositoryError(AppError):
    """Raised when the voucher store cannot read or write its data."""


class VoucherError(AppError):
    """A rejected voucher operation.

    Two voucher errors are equal when their kind and message match, so callers
    and tests can compare against the literal failure result.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message, severity=ErrorSeverity.WARNING)

    @property
    def type(self) -> str:
        return self.kind.value

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """Failure result in its wire shape: ``{"type": ..., "message": ...}``."""
        return {"type": self.type, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VoucherError):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.type, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, message={self.message!r})"


class ConflictError(VoucherError):
    kind = ErrorKind.CONFLICT


class BadRequestError(VoucherError):
    kind = ErrorKind.BAD_REQUEST
