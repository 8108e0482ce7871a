"""
Logging middleware for FreshBooks SDK.

This module provides LoggingMiddleware, a built-in middleware that logs
all HTTP requests and responses with timing information.

Credentials never reach the log: the Authorization header is masked and the
OAuth token payload fields are replaced before formatting.
"""

import logging
import time
from contextvars import ContextVar
from typing import Optional

from freshbooks_sdk.transport.base import TransportResponse

logger = logging.getLogger("freshbooks_sdk.middleware.logging")

_SECRET_FIELDS = {"client_secret", "code", "refresh_token", "access_token"}


def _redact_headers(headers: dict) -> dict:
    return {
        key: ("***" if key.lower() == "authorization" else value)
        for key, value in headers.items()
    }


def _redact_body(body):
    if isinstance(body, dict):
        return {
            key: ("***" if key in _SECRET_FIELDS else value)
            for key, value in body.items()
        }
    return body


class LoggingMiddleware:
    """
    Middleware for logging HTTP requests and responses in FreshBooksClient.
    Uses standard Python logging.
    """

    def __init__(self, level: int = logging.INFO):
        self._level = level
        # Per request: concurrent calls each run in their own task context.
        self._start_time: ContextVar[Optional[float]] = ContextVar(
            "freshbooks_request_start", default=None
        )

    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict,
        params,
        json,
        data,
    ):
        self._start_time.set(time.monotonic())
        logger.log(
            self._level,
            f"Request: {method} {url} | headers={_redact_headers(headers)} "
            f"| params={params} | json={_redact_body(json)}",
        )

    async def on_response(self, response: TransportResponse):
        start = self._start_time.get()
        elapsed = (time.monotonic() - start) if start is not None else None
        logger.log(
            self._level,
            f"Response: {response.status_code}"
            + (f" | elapsed={elapsed:.3f}s" if elapsed is not None else ""),
        )
