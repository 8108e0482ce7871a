"""
Middleware interface for FreshBooksClient.

This module defines the `Middleware` protocol used in FreshBooks SDK.
It allows users to hook into the request/response lifecycle of every HTTP
operation the client performs, including token exchanges and identity lookups.

Any class that implements this interface can be passed to the client as a middleware.

Current implementations:
- Logging (see: LoggingMiddleware) - logs requests/responses with timing
"""

from typing import Any
from typing import Protocol

from freshbooks_sdk.transport.base import TransportResponse


class Middleware(Protocol):
    async def on_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        params: Any,
        json: Any,
        data: Any,
    ) -> None:
        """
        Called before the HTTP request is executed.

        This can be used to:
        - Log request details (current: LoggingMiddleware)
        - Add or modify headers (the dict is sent as-is afterwards)
        - Cancel or abort execution (by raising)

        Args:
            method (str): HTTP method, e.g., 'GET', 'POST'
            url (str): Full URL of the request
            headers (dict): Request headers (modifiable)
            params (Any): Query parameters
            json (Any): JSON body payload
            data (Any): Alternative body (e.g., for form-data)
        """

    async def on_response(self, response: TransportResponse) -> None:
        """
        Called after the HTTP response is received (but before it's parsed).

        Args:
            response (TransportResponse): Response object from transport layer
        """
