"""
Test suite for the FreshBooksClient class.

Focuses on ownership of the settings snapshot and the HttpClient: default
headers, rebuilding after token exchange, and accessor binding.
"""

from datetime import datetime
from datetime import timezone

import pytest

from freshbooks_sdk import __version__
from freshbooks_sdk.accounting import AccountingResource
from freshbooks_sdk.client import FreshBooksClient
from freshbooks_sdk.transport.httpx import HttpxTransport
from tests.fakes import MockTransport
from tests.fakes import json_response
from tests.fakes import queued
from tests.fakes import result_envelope

TOKEN_BODY = {
    "access_token": "new-access",
    "refresh_token": "new-refresh",
    "token_type": "Bearer",
    "created_at": 1704067200,
    "expires_in": 43200,
}


def test_default_headers(authed_settings):
    client = FreshBooksClient(authed_settings, transport=MockTransport())

    headers = client.http.headers

    assert headers["Authorization"] == "Bearer access-abc"
    assert headers["Content-Type"] == "application/json"
    assert headers["Accept"] == "application/json"
    assert headers["User-Agent"] == f"FreshBooks python sdk/{__version__} client_id client-123"


def test_custom_user_agent(settings):
    client = FreshBooksClient(
        settings.model_copy(update={"user_agent": "my-app/2.0"}), transport=MockTransport()
    )

    assert client.http.headers["User-Agent"] == "my-app/2.0"
    assert "Authorization" not in client.http.headers


def test_default_transport_is_httpx(settings):
    client = FreshBooksClient(settings)

    assert isinstance(client.transport, HttpxTransport)


def test_unknown_transport_name(settings):
    with pytest.raises(ValueError):
        FreshBooksClient(settings, transport_name="carrier-pigeon")


@pytest.mark.parametrize(
    "name, sub_path, delete_via_update",
    [
        ("clients", "users/clients", True),
        ("invoices", "invoices/invoices", False),
        ("expenses", "expenses/expenses", True),
        ("payments", "payments/payments", True),
        ("taxes", "taxes/taxes", True),
    ],
)
def test_resource_table(authed_settings, name, sub_path, delete_via_update):
    client = FreshBooksClient(authed_settings, transport=MockTransport())

    resource = getattr(client, name)

    assert isinstance(resource, AccountingResource)
    assert resource.sub_path == sub_path
    assert resource.delete_via_update is delete_via_update
    assert resource.http is client.http


def test_accessors_are_not_cached(authed_settings):
    client = FreshBooksClient(authed_settings, transport=MockTransport())

    assert client.clients is not client.clients


@pytest.mark.asyncio
async def test_refresh_switches_bearer_for_new_accessors(authed_settings):
    """
    GIVEN: an accessor created before a token refresh
    WHEN: the token is refreshed and another accessor is created
    THEN: the new accessor sends the new bearer, the old one keeps the old
    """
    transport = MockTransport(
        queued(
            json_response(200, TOKEN_BODY),
            json_response(200, result_envelope(client={"id": 1})),
            json_response(200, result_envelope(client={"id": 1})),
        )
    )
    client = FreshBooksClient(authed_settings, transport=transport)
    stale_clients = client.clients

    await client.refresh_access_token()
    await client.clients.get("ACM123", 1)
    await stale_clients.get("ACM123", 1)

    assert transport.request_calls[1].headers["Authorization"] == "Bearer new-access"
    assert transport.request_calls[2].headers["Authorization"] == "Bearer access-abc"
    assert client.config.token_expires_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_token_exchange_replaces_snapshot(authed_settings):
    transport = MockTransport(queued(json_response(200, TOKEN_BODY)))
    client = FreshBooksClient(authed_settings, transport=transport)
    before = client.config

    await client.refresh_access_token()

    assert client.config is not before
    assert before.access_token == "access-abc"
    assert client.config.access_token == "new-access"
    assert client.config.client_secret == before.client_secret


def test_resume_session(settings):
    client = FreshBooksClient(settings, transport=MockTransport())
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)

    client.resume_session("stored-access", "stored-refresh", expires)

    assert client.config.access_token == "stored-access"
    assert client.config.refresh_token == "stored-refresh"
    assert client.config.token_expires_at == expires
    assert client.http.headers["Authorization"] == "Bearer stored-access"


@pytest.mark.asyncio
async def test_relative_and_absolute_urls(authed_settings):
    transport = MockTransport()
    client = FreshBooksClient(authed_settings, transport=transport)

    await client.http.get("/users/clients/ACM123")
    await client.http.get("https://elsewhere.test/ping")

    assert transport.request_calls[0].url == "https://api.test/users/clients/ACM123"
    assert transport.request_calls[1].url == "https://elsewhere.test/ping"


@pytest.mark.asyncio
async def test_context_manager_closes_transport(settings):
    transport = MockTransport()

    async with FreshBooksClient(settings, transport=transport):
        pass

    assert transport.closed
