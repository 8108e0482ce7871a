"""
Custom exceptions for the FreshBooks SDK.
Provides meaningful error classes for client consumers.

Hierarchy:
    FreshBooksError
    ├── ConfigurationError
    ├── DecodeError
    └── ApiError
        ├── AuthenticationError
        ├── NotFoundError
        └── ValidationError
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class FieldError:
    """A single field-level error reported by FreshBooks for a rejected payload."""

    field: Optional[str]
    message: str
    errno: Optional[int] = None
    object: Optional[str] = None
    value: Any = None


class FreshBooksError(Exception):
    """
    Base exception for all SDK-level failures.

    Args:
        message (str): Short explanation of the error.
        details (Any | None): Optional structured details (e.g., the error body).
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(FreshBooksError):
    """A setting required by the requested operation is missing."""


class DecodeError(FreshBooksError):
    """The response body does not have the expected shape."""

    def __init__(
        self,
        message: str,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


class ApiError(FreshBooksError):
    """
    FreshBooks answered with a non-2xx status.

    Args:
        message (str): Service-provided message, or a generic one.
        status_code (int): Upstream HTTP status.
        details (Any | None): Parsed error body when available.
        error_code (int | None): FreshBooks ``errno`` when available.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: Optional[Any] = None,
        error_code: Optional[int] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.error_code = error_code

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"


class AuthenticationError(ApiError):
    """Token exchange or identity lookup was rejected by FreshBooks."""


class NotFoundError(ApiError):
    """The requested entity does not exist."""


class ValidationError(ApiError):
    """The entity payload was rejected; ``field_errors`` lists the offending fields."""

    def __init__(
        self,
        message: str,
        status_code: int,
        field_errors: list[FieldError],
        details: Optional[Any] = None,
        error_code: Optional[int] = None,
    ):
        super().__init__(message, status_code, details, error_code)
        self.field_errors = field_errors
