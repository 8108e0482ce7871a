import pytest

from freshbooks_sdk.config import FreshBooksSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep FRESHBOOKS_* variables and any local .env file out of the tests."""
    import os

    for name in list(os.environ):
        if name.startswith("FRESHBOOKS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return FreshBooksSettings(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="https://example.com/callback",
        api_base_url="https://api.test",
        auth_base_url="https://auth.test",
    )


@pytest.fixture
def authed_settings(settings):
    return settings.model_copy(
        update={"access_token": "access-abc", "refresh_token": "refresh-xyz"}
    )
