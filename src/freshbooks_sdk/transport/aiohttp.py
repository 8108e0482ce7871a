"""
Aiohttp transport implementation for FreshBooks SDK.

This module provides AiohttpTransport, an alternative async HTTP client for the SDK.
The session is created lazily on first use so that it binds to the running
event loop rather than the one active at construction time.
"""

from typing import Any

import aiohttp

from .base import BaseTransport
from .base import QueryParams
from .base import TransportResponse


class AiohttpTransport(BaseTransport):
    """
    Async transport implementation using aiohttp.ClientSession.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        params: QueryParams | None = None,
        json: Any = None,
        data: Any = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )

        timeout_obj = aiohttp.ClientTimeout(total=timeout or self._timeout)
        async with self._session.request(
            method=method,
            url=url,
            headers=headers,
            params=params,
            json=json,
            data=data,
            timeout=timeout_obj,
        ) as response:
            content = await response.read()
            return TransportResponse(
                status_code=response.status,
                content=content,
                headers=dict(response.headers),
            )

    async def close(self) -> None:
        if self._session:
            await self._session.close()
