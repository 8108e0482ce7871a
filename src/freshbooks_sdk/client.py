"""
Async-first FreshBooks API SDK Client.

This module provides the main FreshBooksClient class that handles all interactions
with the FreshBooks API. Features include:

- Async-first design with async/await for all API operations
- OAuth2 authorization-code and refresh-token flows
- Generic CRUD accessors for clients, invoices, expenses, payments and taxes
- Multiple HTTP transport backends (httpx, aiohttp, requests)
- Pluggable middleware system for request/response processing

Example usage:
    from freshbooks_sdk import FreshBooksClient, FreshBooksSettings

    settings = FreshBooksSettings(
        client_id="your-client-id",
        client_secret="your-secret",
        redirect_uri="https://example.com/callback",
    )
    client = FreshBooksClient(settings)

    print(client.authorization_url(scopes=["user:profile:read"]))
    token = await client.get_access_token(code_from_redirect)

    identity = await client.current_identity()
    account_id = identity.business_memberships[0].business.account_id
    invoices = await client.invoices.list(account_id, page=1, per_page=25)

    await client.aclose()

Concurrency note:
    A token exchange swaps in a new HttpClient. Requests already in flight
    finish with the token they started with; accessors obtained before the
    exchange keep the old token too. Callers that refresh tokens while other
    requests run must coordinate that themselves.
"""

import logging
from datetime import datetime
from typing import Optional
from typing import Sequence

from freshbooks_sdk._version import __version__
from freshbooks_sdk.accounting import AccountingResource
from freshbooks_sdk.auth import AUTHORIZATION_CODE
from freshbooks_sdk.auth import REFRESH_TOKEN
from freshbooks_sdk.auth import AuthResource
from freshbooks_sdk.config import FreshBooksSettings
from freshbooks_sdk.exceptions import ConfigurationError
from freshbooks_sdk.http_client import HttpClient
from freshbooks_sdk.middleware import Middleware
from freshbooks_sdk.models import AuthorizationToken
from freshbooks_sdk.models import Client
from freshbooks_sdk.models import ClientList
from freshbooks_sdk.models import Expense
from freshbooks_sdk.models import ExpenseList
from freshbooks_sdk.models import Identity
from freshbooks_sdk.models import Invoice
from freshbooks_sdk.models import InvoiceList
from freshbooks_sdk.models import Payment
from freshbooks_sdk.models import PaymentList
from freshbooks_sdk.models import Tax
from freshbooks_sdk.models import TaxList
from freshbooks_sdk.transport import get_transport
from freshbooks_sdk.transport.base import BaseTransport

logger = logging.getLogger("freshbooks_sdk.client")


class FreshBooksClient:
    """
    Async client for the FreshBooks API.

    The client owns the current settings snapshot, the transport, and the
    HttpClient built from them. Resource properties build a new accessor on
    every access, bound to whichever HttpClient is current at that moment.

    Args:
        settings (FreshBooksSettings): SDK configuration with support for environment variables
        transport_name (str | None): Transport backend ('httpx', 'aiohttp', 'requests').
                                   Defaults to settings.transport
        transport (BaseTransport | None): Ready-made transport; takes precedence over transport_name
        middlewares (list[Middleware] | None): Optional list of middleware hooks for
                                             request/response processing

    Example:
        from freshbooks_sdk import FreshBooksClient, FreshBooksSettings
        from freshbooks_sdk.logging_middleware import LoggingMiddleware

        settings = FreshBooksSettings(client_id="id", access_token="token")
        async with FreshBooksClient(settings, middlewares=[LoggingMiddleware()]) as client:
            client_record = await client.clients.get("ACM123", 42)
    """

    def __init__(
        self,
        settings: FreshBooksSettings,
        transport_name: str | None = None,
        transport: BaseTransport | None = None,
        middlewares: list[Middleware] | None = None,
    ):
        self._settings = settings
        self.transport = transport if transport is not None else get_transport(
            transport_name or settings.transport, timeout=settings.timeout
        )
        self.middlewares = middlewares if middlewares is not None else []
        self._http = self._create_http_client()

    @property
    def config(self) -> FreshBooksSettings:
        """The current settings snapshot."""
        return self._settings

    @property
    def http(self) -> HttpClient:
        return self._http

    def _user_agent(self) -> str:
        return self._settings.user_agent or (
            f"FreshBooks python sdk/{__version__} client_id {self._settings.client_id}"
        )

    def _default_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self._user_agent(),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._settings.access_token:
            headers["Authorization"] = f"Bearer {self._settings.access_token}"
        return headers

    def _create_http_client(self) -> HttpClient:
        return HttpClient(
            transport=self.transport,
            base_url=self._settings.api_base_url,
            headers=self._default_headers(),
            middlewares=self.middlewares,
        )

    def _replace_settings(self, **changes) -> None:
        self._settings = self._settings.model_copy(update=changes)
        self._http = self._create_http_client()

    def resume_session(
        self,
        access_token: str,
        refresh_token: Optional[str] = None,
        token_expires_at: Optional[datetime] = None,
    ) -> None:
        """Install tokens obtained earlier, e.g. loaded by the caller from its own storage."""
        self._replace_settings(
            access_token=access_token,
            refresh_token=refresh_token or self._settings.refresh_token,
            token_expires_at=token_expires_at,
        )

    @property
    def auth(self) -> AuthResource:
        return AuthResource(self._http, self._settings)

    def authorization_url(self, scopes: Optional[Sequence[str]] = None) -> str:
        """
        URL to redirect the user to for granting access.

        Raises:
            ConfigurationError: If redirect_uri is not configured.
        """
        return self.auth.authorization_url(scopes)

    async def exchange_token(
        self, grant_type: str, code_type: str, code: str
    ) -> AuthorizationToken:
        """
        Call the OAuth token endpoint and install the resulting tokens.

        On success the settings snapshot is replaced with one carrying the new
        access token, refresh token and expiry, and the HttpClient is rebuilt
        before this method returns. On failure the settings are unchanged.

        Raises:
            ConfigurationError: If client_secret or redirect_uri is missing.
            AuthenticationError: If FreshBooks rejects the exchange.
        """
        token = await self.auth.request_token(grant_type, code_type, code)
        self._replace_settings(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            token_expires_at=token.expires_at,
        )
        logger.info(f"Installed new access token (expires at {token.expires_at.isoformat()})")
        return token

    async def get_access_token(self, code: str) -> AuthorizationToken:
        """Exchange the authorization code from the redirect for tokens."""
        return await self.exchange_token(AUTHORIZATION_CODE, "code", code)

    async def refresh_access_token(
        self, refresh_token: Optional[str] = None
    ) -> AuthorizationToken:
        """
        Exchange a refresh token for a new access token.

        Uses ``refresh_token`` when given, otherwise the one in the settings.

        Raises:
            ConfigurationError: If no refresh token is available.
        """
        token = refresh_token or self._settings.refresh_token
        if not token:
            raise ConfigurationError("refresh_token must be configured or provided")
        return await self.exchange_token(REFRESH_TOKEN, "refresh_token", token)

    async def current_identity(self) -> Identity:
        """Identity of the user the current access token belongs to."""
        return await self.auth.current_identity()

    @property
    def clients(self) -> AccountingResource[Client, ClientList]:
        return AccountingResource(
            self._http, "users/clients", "client", "clients", Client, ClientList
        )

    @property
    def invoices(self) -> AccountingResource[Invoice, InvoiceList]:
        return AccountingResource(
            self._http,
            "invoices/invoices",
            "invoice",
            "invoices",
            Invoice,
            InvoiceList,
            delete_via_update=False,
        )

    @property
    def expenses(self) -> AccountingResource[Expense, ExpenseList]:
        return AccountingResource(
            self._http, "expenses/expenses", "expense", "expenses", Expense, ExpenseList
        )

    @property
    def payments(self) -> AccountingResource[Payment, PaymentList]:
        return AccountingResource(
            self._http, "payments/payments", "payment", "payments", Payment, PaymentList
        )

    @property
    def taxes(self) -> AccountingResource[Tax, TaxList]:
        return AccountingResource(
            self._http, "taxes/taxes", "tax", "taxes", Tax, TaxList
        )

    async def aclose(self):
        """
        Gracefully close the transport and its connection pool.

        Example:
            async with FreshBooksClient(settings) as client:
                taxes = await client.taxes.list("ACM123")
        """
        await self.transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
