import json

import pytest
from click.testing import CliRunner

from freshbooks_sdk import cli as cli_module
from freshbooks_sdk.client import FreshBooksClient
from freshbooks_sdk.config import FreshBooksSettings
from tests.fakes import MockTransport
from tests.fakes import json_response
from tests.fakes import queued
from tests.fakes import result_envelope


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("FRESHBOOKS_CLIENT_ID", "client-123")
    monkeypatch.setenv("FRESHBOOKS_CLIENT_SECRET", "secret-456")
    monkeypatch.setenv("FRESHBOOKS_REDIRECT_URI", "https://example.com/callback")
    monkeypatch.setenv("FRESHBOOKS_ACCESS_TOKEN", "access-abc")
    monkeypatch.setenv("FRESHBOOKS_API_BASE_URL", "https://api.test")
    monkeypatch.setenv("FRESHBOOKS_AUTH_BASE_URL", "https://auth.test")


@pytest.fixture
def fake_transport(monkeypatch):
    transport = MockTransport()

    def make_client(verbose=False):
        return FreshBooksClient(FreshBooksSettings(), transport=transport)

    monkeypatch.setattr(cli_module, "_make_client", make_client)
    return transport


def test_help():
    result = CliRunner().invoke(cli_module.cli, ["--help"])

    assert result.exit_code == 0
    assert "auth-url" in result.output
    assert "get-token" in result.output


def test_auth_url(env):
    result = CliRunner().invoke(cli_module.cli, ["auth-url", "--scope", "user:profile:read"])

    assert result.exit_code == 0
    assert result.output.startswith("https://auth.test/oauth/authorize?client_id=client-123")
    assert "scope=user%3Aprofile%3Aread" in result.output


def test_auth_url_without_redirect_uri(env, monkeypatch):
    monkeypatch.delenv("FRESHBOOKS_REDIRECT_URI")

    result = CliRunner().invoke(cli_module.cli, ["auth-url"])

    assert result.exit_code == 1
    assert "redirect_uri must be configured" in result.output


def test_missing_client_id():
    result = CliRunner().invoke(cli_module.cli, ["auth-url"])

    assert result.exit_code == 1
    assert "FRESHBOOKS_CLIENT_ID" in result.output


def test_get_token(env, fake_transport):
    fake_transport.handler = queued(
        json_response(
            200,
            {
                "access_token": "tok1",
                "refresh_token": "ref1",
                "token_type": "Bearer",
                "created_at": "2024-01-01T00:00:00Z",
                "expires_in": 3600,
            },
        )
    )

    result = CliRunner().invoke(cli_module.cli, ["get-token", "--code", "abc123"])

    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert output["access_token"] == "tok1"
    assert output["expires_at"] == "2024-01-01T01:00:00+00:00"
    assert fake_transport.closed


def test_list_clients(env, fake_transport):
    fake_transport.handler = queued(
        json_response(200, result_envelope(clients=[{"id": 1, "fname": "Gordon"}], total=1))
    )

    result = CliRunner().invoke(cli_module.cli, ["list", "clients", "--account-id", "ACM123"])

    assert result.exit_code == 0, result.output
    output = json.loads(result.output)
    assert output["total"] == 1
    assert output["clients"] == [{"id": 1, "fname": "Gordon"}]


def test_get_not_found_exits_non_zero(env, fake_transport):
    fake_transport.handler = queued(json_response(404, {"message": "Invoice not found"}))

    result = CliRunner().invoke(cli_module.cli, ["get", "invoices", "42", "--account-id", "ACM123"])

    assert result.exit_code == 1
    assert "404: Invoice not found" in result.output


def test_delete(env, fake_transport):
    fake_transport.handler = queued(json_response(200, result_envelope(expense={"id": 5, "vis_state": 1})))

    result = CliRunner().invoke(cli_module.cli, ["delete", "expenses", "5", "--account-id", "ACM123"])

    assert result.exit_code == 0, result.output
    assert "Deleted expenses 5" in result.output
    assert fake_transport.last_request.json == {"expense": {"vis_state": 1}}
