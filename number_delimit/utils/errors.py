"""Centralized error codes and domain exceptions.

Formatting itself never fails for well-formed input; these errors mark the two
boundaries where bad input is rejected: numeric normalization and option
resolution.
"""
from __future__ import annotations
from typing import Any, Dict

ERROR_CODES = {
    "validation": "VALIDATION_ERROR",
    # Boundary specialisations
    "invalid_number": "INVALID_NUMBER",
    "invalid_options": "INVALID_OPTIONS",
}


class DomainError(Exception):
    """Base domain error storing standardized fields."""

    def __init__(self, code: str, message: str, details: Any | None = None):  # noqa: D401
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "status": "error",
            "error": {
                "code": self.code,
                "message": self.message,
            },
        }
        if self.details is not None:
            payload["error"]["details"] = self.details
        return payload


class InvalidNumberError(DomainError):
    """Raised when a value cannot be read as a finite number."""

    def __init__(self, value: Any, reason: str = "not a number"):
        super().__init__(
            ERROR_CODES["invalid_number"], f"Cannot format {value!r}: {reason}", details={"value": repr(value)})
        self.value = value


class InvalidOptionsError(DomainError):
    """Raised when formatting options fail validation."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(ERROR_CODES["invalid_options"], message, details=details)


__all__ = [
    "ERROR_CODES",
    "DomainError",
    "InvalidNumberError",
    "InvalidOptionsError",
]
