import asyncio
from typing import Any

import requests

from .base import BaseTransport
from .base import QueryParams
from .base import TransportResponse


class RequestsTransport(BaseTransport):
    """
    Sync transport implementation using requests.Session.

    This transport wraps the synchronous requests library in an async interface
    so it can sit behind the async-first client. Each call runs in the default
    thread pool executor of the running loop.
    """

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout
        self._session = requests.Session()

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
        loop = asyncio.get_running_loop()

        def make_request() -> requests.Response:
            return self._session.request(
                method=method,
                url=url,
                headers=headers or {},
                params=params,
                json=json,
                data=data,
                timeout=timeout or self._timeout,
            )

        response = await loop.run_in_executor(None, make_request)
        return TransportResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._session.close)
