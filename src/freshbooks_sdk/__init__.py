"""
FreshBooks SDK - Async-first SDK for the FreshBooks API.

This SDK provides:
- Async client for the FreshBooks accounting API
- Synchronous wrapper for sync operations
- OAuth2 authorization-code and refresh-token flows
- Typed models for clients, invoices, expenses, payments and taxes
- Multiple HTTP transport support
- Middleware support
"""

from ._version import __version__
from .accounting import AccountingResource
from .auth import AuthResource
from .client import FreshBooksClient
from .client_sync import FreshBooksClientSync
from .config import FreshBooksSettings
from .exceptions import ApiError
from .exceptions import AuthenticationError
from .exceptions import ConfigurationError
from .exceptions import DecodeError
from .exceptions import FieldError
from .exceptions import FreshBooksError
from .exceptions import NotFoundError
from .exceptions import ValidationError
from .logging_middleware import LoggingMiddleware
from .middleware import Middleware

__all__ = [
    "__version__",
    "FreshBooksClient",
    "FreshBooksClientSync",
    "FreshBooksSettings",
    "AccountingResource",
    "AuthResource",
    "FreshBooksError",
    "ConfigurationError",
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "DecodeError",
    "FieldError",
    "Middleware",
    "LoggingMiddleware",
]
