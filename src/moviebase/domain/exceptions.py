"""Structured errors raised by the movie domain and its persistence adapters.

Every error carries a kind (used by the API layer to pick an HTTP status),
an optional parameter name, an optional machine-readable code and a
human-readable message.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of domain errors."""

    VALIDATION = "validation"
    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    EXIST = "exist"
    NOT_EXIST = "not_exist"
    DATABASE = "database"
    INTERNAL = "internal"
    CANCELLED = "cancelled"


class DomainError(Exception):
    """Error with a kind, parameter, code and message."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        param: str | None = None,
        code: str | None = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.param = param
        self.code = code
        super().__init__(message)

    def matches(self, other: "DomainError") -> bool:
        """Compare kind, param, code and message with another error."""
        return (
            self.kind == other.kind
            and self.param == other.param
            and self.code == other.code
            and self.message == other.message
        )

    def to_dict(self) -> dict[str, str | None]:
        """Serialize for the API error envelope."""
        return {
            "kind": self.kind.value,
            "code": self.code,
            "param": self.param,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return (
            f"DomainError(kind={self.kind.value!r}, param={self.param!r}, "
            f"code={self.code!r}, message={self.message!r})"
        )


def missing_field(field: str) -> str:
    """Message used when a required field has no value."""
    return f"{field} is required"


def validation_error(param: str, message: str, code: str | None = None) -> DomainError:
    """Shortcut for a validation error on a single parameter."""
    return DomainError(ErrorKind.VALIDATION, message, param=param, code=code)
