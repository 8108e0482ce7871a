"""Typed records decoded from FreshBooks responses."""

from .accounting import Client
from .accounting import ClientList
from .accounting import EntityList
from .accounting import Expense
from .accounting import ExpenseList
from .accounting import Invoice
from .accounting import InvoiceList
from .accounting import LineItem
from .accounting import Money
from .accounting import Payment
from .accounting import PaymentList
from .accounting import Tax
from .accounting import TaxList
from .auth import AuthorizationToken
from .auth import BusinessMembership
from .auth import BusinessReference
from .auth import Identity
from .base import FreshBooksModel
from .base import VisState

__all__ = [
    "AuthorizationToken",
    "BusinessMembership",
    "BusinessReference",
    "Client",
    "ClientList",
    "EntityList",
    "Expense",
    "ExpenseList",
    "FreshBooksModel",
    "Identity",
    "Invoice",
    "InvoiceList",
    "LineItem",
    "Money",
    "Payment",
    "PaymentList",
    "Tax",
    "TaxList",
    "VisState",
]
