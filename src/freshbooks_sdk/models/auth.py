from datetime import datetime
from datetime import timedelta
from typing import Optional

from pydantic import Field

from .base import FreshBooksModel


class AuthorizationToken(FreshBooksModel):
    """
    Result of an OAuth token exchange.

    ``created_at`` accepts both ISO-8601 strings and UNIX timestamps, the
    latter being what FreshBooks returns.
    """

    access_token: str
    refresh_token: str
    token_type: str
    created_at: datetime
    expires_in: int
    scope: Optional[str] = None

    @property
    def expires_at(self) -> datetime:
        return self.created_at + timedelta(seconds=self.expires_in)


class BusinessReference(FreshBooksModel):
    id: int
    name: Optional[str] = None
    account_id: Optional[str] = None
    business_uuid: Optional[str] = None


class BusinessMembership(FreshBooksModel):
    id: int
    role: Optional[str] = None
    business: BusinessReference


class Identity(FreshBooksModel):
    """The user the current access token belongs to."""

    id: int
    identity_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    language: Optional[str] = None
    business_memberships: list[BusinessMembership] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
