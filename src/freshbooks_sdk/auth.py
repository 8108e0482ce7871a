"""
This module provides an asynchronous AuthResource class responsible for:
- building the OAuth2 authorization redirect URL
- exchanging authorization codes and refresh tokens for access tokens
- fetching the identity behind the current access token.

AuthResource never changes configuration itself. It returns the decoded
AuthorizationToken and leaves it to FreshBooksClient to install a new
settings snapshot and rebuild its HttpClient.
"""

import logging
from typing import Optional
from typing import Sequence
from urllib.parse import urlencode

from pydantic import ValidationError as PydanticValidationError

from freshbooks_sdk.config import FreshBooksSettings
from freshbooks_sdk.exceptions import ApiError
from freshbooks_sdk.exceptions import AuthenticationError
from freshbooks_sdk.exceptions import ConfigurationError
from freshbooks_sdk.exceptions import DecodeError
from freshbooks_sdk.http_client import HttpClient
from freshbooks_sdk.models import AuthorizationToken
from freshbooks_sdk.models import Identity
from freshbooks_sdk.responses import error_code
from freshbooks_sdk.responses import error_message
from freshbooks_sdk.responses import read_json

logger = logging.getLogger("freshbooks_sdk.auth")

AUTHORIZATION_CODE = "authorization_code"
REFRESH_TOKEN = "refresh_token"

ME_ENDPOINT = "auth/api/v1/users/me"


class AuthResource:
    """
    OAuth2 calls against FreshBooks.

    Attributes:
        http (HttpClient): Client used for the token and identity requests.
        settings (FreshBooksSettings): Snapshot providing client credentials and URLs.
    """

    def __init__(self, http: HttpClient, settings: FreshBooksSettings):
        self.http = http
        self.settings = settings

    @property
    def token_url(self) -> str:
        return f"{self.settings.auth_base_url.rstrip('/')}/oauth/token"

    def authorization_url(self, scopes: Optional[Sequence[str]] = None) -> str:
        """
        Returns the URL the user must visit to grant access to the application.

        Args:
            scopes (Sequence[str] | None): Scopes to request, sent space-separated.

        Raises:
            ConfigurationError: If ``redirect_uri`` is not configured.
        """
        if not self.settings.redirect_uri:
            raise ConfigurationError("redirect_uri must be configured")
        params = {
            "client_id": self.settings.client_id,
            "response_type": "code",
            "redirect_uri": self.settings.redirect_uri,
        }
        if scopes is not None:
            params["scope"] = " ".join(scopes)
        return f"{self.settings.auth_base_url.rstrip('/')}/oauth/authorize?{urlencode(params)}"

    async def request_token(
        self, grant_type: str, code_type: str, code: str
    ) -> AuthorizationToken:
        """
        Calls the OAuth token endpoint.

        Args:
            grant_type (str): ``authorization_code`` or ``refresh_token``.
            code_type (str): Payload key carrying ``code`` (``code`` or ``refresh_token``).
            code (str): The authorization code or refresh token.

        Returns:
            AuthorizationToken: Access token, refresh token and expiry details.

        Raises:
            ConfigurationError: If ``redirect_uri`` or ``client_secret`` is missing.
            AuthenticationError: If FreshBooks rejects the exchange or the body is malformed.
        """
        if not self.settings.redirect_uri:
            raise ConfigurationError("redirect_uri must be configured")
        if not self.settings.client_secret:
            raise ConfigurationError("client_secret must be configured")

        payload = {
            "client_id": self.settings.client_id,
            "client_secret": self.settings.client_secret,
            "redirect_uri": self.settings.redirect_uri,
            "grant_type": grant_type,
            code_type: code,
        }
        logger.debug(f"Requesting token with grant_type={grant_type}")
        response = await self.http.post(self.token_url, json=payload)
        data = read_json(response)

        if not response.is_success:
            logger.error(f"Token exchange failed: {response.status_code}")
            raise AuthenticationError(
                error_message(response, data),
                status_code=response.status_code,
                details=data,
                error_code=error_code(data),
            )

        if not isinstance(data, dict):
            raise AuthenticationError(
                "Token response is not a JSON object",
                status_code=response.status_code,
                details=response.text,
            )
        try:
            token = AuthorizationToken.model_validate(data)
        except PydanticValidationError as exc:
            raise AuthenticationError(
                f"Malformed token response: {exc.error_count()} invalid field(s)",
                status_code=response.status_code,
                details=exc.errors(include_input=False),
            ) from exc

        logger.debug(f"New access token acquired (expires at {token.expires_at.isoformat()})")
        return token

    async def current_identity(self) -> Identity:
        """
        Fetches the identity of the user the access token was issued to.

        Raises:
            ConfigurationError: If no access token is configured.
            AuthenticationError: On 401.
            ApiError: On any other non-2xx status.
            DecodeError: If the body is not an identity.
        """
        if not self.http.is_authenticated:
            raise ConfigurationError("access_token must be configured")

        response = await self.http.get(ME_ENDPOINT)
        data = read_json(response)

        if response.status_code == 401:
            raise AuthenticationError(
                error_message(response, data),
                status_code=response.status_code,
                details=data,
                error_code=error_code(data),
            )
        if not response.is_success:
            raise ApiError(
                error_message(response, data),
                status_code=response.status_code,
                details=data,
                error_code=error_code(data),
            )

        body = data.get("response") if isinstance(data, dict) else None
        if not isinstance(body, dict):
            raise DecodeError(
                "Identity response missing 'response'",
                details=data,
                status_code=response.status_code,
            )
        try:
            return Identity.model_validate(body)
        except PydanticValidationError as exc:
            raise DecodeError(
                "Identity response has an unexpected shape",
                details=exc.errors(include_input=False),
                status_code=response.status_code,
            ) from exc
