"""
HTTP client bound to a base URI and default headers.

An HttpClient is built by FreshBooksClient from one settings snapshot and is
never modified afterwards. After a token exchange the owning client builds a
new one; accessors created earlier keep the instance they were given.
"""

import logging
from typing import Any

from freshbooks_sdk.middleware import Middleware
from freshbooks_sdk.transport.base import BaseTransport
from freshbooks_sdk.transport.base import QueryParams
from freshbooks_sdk.transport.base import TransportResponse

logger = logging.getLogger("freshbooks_sdk.http")

GET = "GET"
POST = "POST"
PUT = "PUT"
PATCH = "PATCH"
DELETE = "DELETE"


class HttpClient:
    """
    Thin wrapper around a transport that applies a base URI, default headers
    and the middleware chain.

    Args:
        transport (BaseTransport): Backend performing the actual I/O.
        base_url (str): Prefix for relative paths.
        headers (dict[str, str]): Headers sent with every request.
        middlewares (list[Middleware] | None): Hooks run around each request.
    """

    def __init__(
        self,
        transport: BaseTransport,
        base_url: str,
        headers: dict[str, str],
        middlewares: list[Middleware] | None = None,
    ):
        self.transport = transport
        self.base_url = base_url.rstrip("/")
        self._headers = dict(headers)
        self.middlewares = middlewares if middlewares is not None else []

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def is_authenticated(self) -> bool:
        return "Authorization" in self._headers

    def build_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        json: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        url = self.build_url(path)
        request_headers = self.headers
        if headers:
            request_headers.update(headers)

        for mw in self.middlewares:
            await mw.on_request(
                method=method,
                url=url,
                headers=request_headers,
                params=params,
                json=json,
                data=data,
            )

        logger.debug(f"{method} {url}")
        response = await self.transport.request(
            method=method,
            url=url,
            headers=request_headers,
            params=params,
            json=json,
            data=data,
        )

        for mw in self.middlewares:
            await mw.on_response(response)

        return response

    async def get(self, path: str, params: QueryParams | None = None) -> TransportResponse:
        return await self.request(GET, path, params=params)

    async def post(self, path: str, json: Any = None) -> TransportResponse:
        return await self.request(POST, path, json=json)

    async def put(self, path: str, json: Any = None) -> TransportResponse:
        return await self.request(PUT, path, json=json)

    async def delete(self, path: str) -> TransportResponse:
        return await self.request(DELETE, path)
