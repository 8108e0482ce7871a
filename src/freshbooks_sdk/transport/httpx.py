from typing import Any

import httpx

from .base import BaseTransport
from .base import QueryParams
from .base import TransportResponse


class HttpxTransport(BaseTransport):
    """
    Async transport implementation using httpx.AsyncClient.

    An existing ``httpx.AsyncClient`` may be passed in, e.g. one built on
    ``httpx.MockTransport`` in tests.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

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
        response = await self._client.request(
            method=method,
            url=url,
            headers=headers,
            params=params,
            json=json,
            data=data,
            timeout=timeout or self._timeout,
        )
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        await self._client.aclose()
