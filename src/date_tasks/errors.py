"""Error classes and helpers for date-tasks.

Defines a small structured exception model and a function to convert
exceptions to serializable error payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, TypedDict


class ErrorPayload(TypedDict, total=False):
    code: str
    message: str
    details: Dict[str, Any]


@dataclass
class AppError(Exception):
    """Base application error with a code and optional details."""

    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        payload: ErrorPayload = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class DateParseError(AppError):
    """Raised when a date string does not match the expected token layout."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("PARSE_ERROR", message, details)


def to_error_payload(error: Exception, *, value: Optional[str] = None) -> ErrorPayload:
    """Convert an exception into a structured error payload.

    Args:
        error: The exception to convert.
        value: Optional input string that might help with diagnosis.

    Returns:
        A dictionary with ``code``, ``message`` and optional ``details``.

    Examples:
        >>> try:
        ...     raise DateParseError("Unknown month", {"value": "Foo 1, 2000"})
        ... except Exception as e:
        ...     payload = to_error_payload(e)
        ...     assert payload["code"] == "PARSE_ERROR"
    """

    if isinstance(error, AppError):
        return error.to_payload()
    # Fallback: wrap generic exceptions
    details: Dict[str, Any] = {}
    if value is not None:
        details["value"] = value
    return {"code": "INTERNAL", "message": str(error), "details": details}
