from datetime import datetime
from datetime import timezone

import pytest

from freshbooks_sdk import FreshBooksClientSync
from freshbooks_sdk.exceptions import NotFoundError
from tests.fakes import MockTransport
from tests.fakes import json_response
from tests.fakes import queued
from tests.fakes import result_envelope


def test_sync_token_exchange_and_resource_calls(settings):
    transport = MockTransport(
        queued(
            json_response(
                200,
                {
                    "access_token": "tok1",
                    "refresh_token": "ref1",
                    "token_type": "Bearer",
                    "created_at": "2024-01-01T00:00:00Z",
                    "expires_in": 3600,
                },
            ),
            json_response(200, result_envelope(payments=[{"id": 5, "invoiceid": 9}], total=1)),
            json_response(404, {"message": "Payment not found"}),
        )
    )

    with FreshBooksClientSync(settings, transport=transport) as client:
        token = client.get_access_token("abc123")
        payments = client.payments.list("ACM123")
        with pytest.raises(NotFoundError):
            client.payments.get("ACM123", 6)

    assert token.expires_at == datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)
    assert client.config.access_token == "tok1"
    assert [payment.id for payment in payments.items] == [5]
    assert transport.request_calls[1].headers["Authorization"] == "Bearer tok1"
    assert transport.closed


def test_sync_delete_via_update(authed_settings):
    transport = MockTransport(queued(json_response(200, result_envelope(tax={"id": 3, "vis_state": 1}))))
    client = FreshBooksClientSync(authed_settings, transport=transport)

    client.taxes.delete("ACM123", 3)
    client.close()
    client.close()

    assert transport.last_request.method == "PUT"
    assert transport.last_request.json == {"tax": {"vis_state": 1}}


def test_sync_authorization_url(settings):
    client = FreshBooksClientSync(settings, transport=MockTransport())
    try:
        assert client.authorization_url().startswith("https://auth.test/oauth/authorize?")
    finally:
        client.close()


def test_sync_exchange_token_with_refresh_grant(authed_settings):
    transport = MockTransport(
        queued(
            json_response(
                200,
                {
                    "access_token": "tok2",
                    "refresh_token": "ref2",
                    "token_type": "Bearer",
                    "created_at": 1704067200,
                    "expires_in": 3600,
                },
            )
        )
    )

    with FreshBooksClientSync(authed_settings, transport=transport) as client:
        token = client.exchange_token("refresh_token", "refresh_token", "refresh-xyz")

    assert token.access_token == "tok2"
    assert client.config.access_token == "tok2"
    assert client.config.refresh_token == "ref2"
    assert transport.last_request.json["grant_type"] == "refresh_token"
    assert transport.last_request.json["refresh_token"] == "refresh-xyz"
