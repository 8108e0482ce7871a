"""
Configuration management for FreshBooks SDK.

This module provides FreshBooksSettings class that handles all SDK configuration
with support for environment variables, .env files, and sensible defaults.

Environment variables are automatically loaded with FRESHBOOKS_ prefix.
Example: FRESHBOOKS_CLIENT_ID=your_client_id

Settings are frozen. The client replaces its snapshot after every token
exchange instead of mutating it, so an HttpClient built from an older snapshot
keeps sending the token it was built with.
"""

from datetime import datetime
from datetime import timezone
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class FreshBooksSettings(BaseSettings):
    """
    Configuration settings for FreshBooks SDK with environment variable support.

    This class automatically loads configuration from:
    - Environment variables (with FRESHBOOKS_ prefix)
    - .env files
    - Default values for optional settings

    Example:
        # From environment
        export FRESHBOOKS_CLIENT_ID=your_client_id
        export FRESHBOOKS_CLIENT_SECRET=your_secret
        export FRESHBOOKS_REDIRECT_URI=https://example.com/callback

        # In code
        settings = FreshBooksSettings()
    """

    client_id: str = Field(..., description="OAuth application client id")
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_expires_at: Optional[datetime] = None

    api_base_url: str = "https://api.freshbooks.com"
    auth_base_url: str = "https://auth.freshbooks.com"
    user_agent: Optional[str] = None
    timeout: float = 30.0
    transport: str = "httpx"  # default, can be 'aiohttp' or 'requests'

    model_config = SettingsConfigDict(
        env_prefix="FRESHBOOKS_", env_file=".env", extra="ignore", frozen=True
    )

    def is_token_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Checks whether the stored access token has passed its expiry.

        A missing ``token_expires_at`` is treated as "unknown", not expired.
        """
        if self.token_expires_at is None:
            return False
        expires_at = self.token_expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return (now or datetime.now(timezone.utc)) >= expires_at
