"""
Synchronous wrapper for FreshBooksClient.

This module provides a synchronous interface on top of the async FreshBooksClient
to support users who need sync operations.

The wrapper keeps one private event loop for its whole lifetime so that the
transport's connection pool stays bound to a single loop across calls.
"""

import asyncio
from datetime import datetime
from typing import Any
from typing import Generic
from typing import Mapping
from typing import Optional
from typing import Sequence
from typing import Union

from .accounting import AccountingResource
from .accounting import EntityT
from .accounting import ListT
from .accounting import Payload
from .client import FreshBooksClient
from .config import FreshBooksSettings
from .middleware import Middleware
from .models import AuthorizationToken
from .models import Identity
from .transport.base import BaseTransport


class SyncAccountingResource(Generic[EntityT, ListT]):
    """Blocking view over an AccountingResource."""

    def __init__(self, resource: AccountingResource[EntityT, ListT], loop: asyncio.AbstractEventLoop):
        self._resource = resource
        self._loop = loop

    def get(self, account_id: str, entity_id: Union[int, str]) -> EntityT:
        return self._loop.run_until_complete(self._resource.get(account_id, entity_id))

    def list(
        self,
        account_id: str,
        filters: Optional[Mapping[str, Any]] = None,
        includes: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> ListT:
        return self._loop.run_until_complete(
            self._resource.list(account_id, filters, includes, page, per_page)
        )

    def create(self, account_id: str, data: Payload) -> EntityT:
        return self._loop.run_until_complete(self._resource.create(account_id, data))

    def update(self, account_id: str, entity_id: Union[int, str], data: Payload) -> EntityT:
        return self._loop.run_until_complete(
            self._resource.update(account_id, entity_id, data)
        )

    def delete(self, account_id: str, entity_id: Union[int, str]) -> None:
        self._loop.run_until_complete(self._resource.delete(account_id, entity_id))


class FreshBooksClientSync:
    """
    Synchronous wrapper for FreshBooksClient.

    This class provides a synchronous interface on top of the async FreshBooksClient,
    allowing users to use the SDK in synchronous contexts. It must not be
    used from inside a running event loop.

    Example:
        with FreshBooksClientSync(settings) as client:
            token = client.get_access_token("code-from-redirect")
            clients = client.clients.list("ACM123")
    """

    def __init__(
        self,
        settings: FreshBooksSettings,
        transport_name: str | None = None,
        transport: BaseTransport | None = None,
        middlewares: list[Middleware] | None = None,
    ):
        """
        Initialize the synchronous client.

        Args:
            settings: API configuration settings
            transport_name: HTTP transport to use (httpx, aiohttp, requests)
            transport: Ready-made transport instance
            middlewares: Request/response hooks
        """
        self._loop = asyncio.new_event_loop()
        self._async_client = FreshBooksClient(
            settings=settings,
            transport_name=transport_name,
            transport=transport,
            middlewares=middlewares,
        )

    def _run(self, coro):
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> FreshBooksSettings:
        return self._async_client.config

    def resume_session(
        self,
        access_token: str,
        refresh_token: Optional[str] = None,
        token_expires_at: Optional[datetime] = None,
    ) -> None:
        self._async_client.resume_session(access_token, refresh_token, token_expires_at)

    def authorization_url(self, scopes: Optional[Sequence[str]] = None) -> str:
        return self._async_client.authorization_url(scopes)

    def exchange_token(self, grant_type: str, code_type: str, code: str) -> AuthorizationToken:
        return self._run(self._async_client.exchange_token(grant_type, code_type, code))

    def get_access_token(self, code: str) -> AuthorizationToken:
        """
        Synchronous authorization-code exchange.

        Raises:
            ConfigurationError: If client_secret or redirect_uri is missing
            AuthenticationError: If FreshBooks rejects the code
        """
        return self._run(self._async_client.get_access_token(code))

    def refresh_access_token(self, refresh_token: Optional[str] = None) -> AuthorizationToken:
        return self._run(self._async_client.refresh_access_token(refresh_token))

    def current_identity(self) -> Identity:
        return self._run(self._async_client.current_identity())

    def _wrap(self, resource: AccountingResource) -> SyncAccountingResource:
        return SyncAccountingResource(resource, self._loop)

    @property
    def clients(self) -> SyncAccountingResource:
        return self._wrap(self._async_client.clients)

    @property
    def invoices(self) -> SyncAccountingResource:
        return self._wrap(self._async_client.invoices)

    @property
    def expenses(self) -> SyncAccountingResource:
        return self._wrap(self._async_client.expenses)

    @property
    def payments(self) -> SyncAccountingResource:
        return self._wrap(self._async_client.payments)

    @property
    def taxes(self) -> SyncAccountingResource:
        return self._wrap(self._async_client.taxes)

    def close(self):
        """
        Synchronous cleanup of client resources.
        """
        if self._loop.is_closed():
            return
        try:
            self._run(self._async_client.aclose())
        finally:
            self._loop.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
