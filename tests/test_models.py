from datetime import date
from datetime import datetime
from datetime import timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from freshbooks_sdk.models import AuthorizationToken
from freshbooks_sdk.models import ClientList
from freshbooks_sdk.models import Expense
from freshbooks_sdk.models import Identity
from freshbooks_sdk.models import Invoice
from freshbooks_sdk.models import VisState


def test_authorization_token_from_unix_timestamp():
    token = AuthorizationToken.from_dict(
        {
            "access_token": "a",
            "refresh_token": "r",
            "token_type": "Bearer",
            "created_at": 1704067200,
            "expires_in": 43200,
            "scope": "user:profile:read",
        }
    )

    assert token.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert token.expires_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert token.scope == "user:profile:read"


def test_authorization_token_is_frozen():
    token = AuthorizationToken(
        access_token="a",
        refresh_token="r",
        token_type="Bearer",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        expires_in=60,
    )

    with pytest.raises(PydanticValidationError):
        token.access_token = "b"


def test_identity_full_name():
    identity = Identity.from_dict({"id": 1, "first_name": "Gordon", "business_memberships": []})

    assert identity.full_name == "Gordon"
    assert identity.business_memberships == []


def test_invoice_to_dict_round_trip():
    invoice = Invoice.from_dict(
        {
            "id": 1,
            "create_date": "2024-03-01",
            "amount": {"amount": "10.50", "code": "USD"},
            "vis_state": 2,
            "custom_field": "kept",
        }
    )

    assert invoice.create_date == date(2024, 3, 1)
    assert invoice.vis_state is VisState.ARCHIVED
    assert invoice.to_dict() == {
        "id": 1,
        "create_date": "2024-03-01",
        "amount": {"amount": "10.50", "code": "USD"},
        "vis_state": 2,
        "lines": [],
        "custom_field": "kept",
    }


def test_expense_aliases():
    expense = Expense.from_dict(
        {"id": 9, "taxName1": "HST", "taxAmount1": {"amount": "1.30", "code": "CAD"}}
    )

    assert expense.tax_name1 == "HST"
    assert expense.tax_amount1.amount == Decimal("1.30")
    assert expense.to_dict()["taxName1"] == "HST"


def test_entity_list():
    result = ClientList(items=[{"id": 1}, {"id": 2}], page=1, pages=1, per_page=15, total=2)

    assert len(result) == 2
    assert result.items[1].id == 2
