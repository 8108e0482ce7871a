"""
Accounting entities and their paginated list wrappers.

Only commonly used fields are declared; anything else FreshBooks returns is
kept as an extra attribute on the record.
"""

import datetime as dt
from decimal import Decimal
from typing import Generic
from typing import Optional
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .base import FreshBooksModel
from .base import VisState


class Money(FreshBooksModel):
    amount: Decimal
    code: str


class Client(FreshBooksModel):
    id: int
    userid: Optional[int] = None
    organization: Optional[str] = None
    fname: Optional[str] = None
    lname: Optional[str] = None
    email: Optional[str] = None
    currency_code: Optional[str] = None
    vis_state: Optional[VisState] = None
    updated: Optional[dt.datetime] = None


class LineItem(FreshBooksModel):
    name: Optional[str] = None
    description: Optional[str] = None
    qty: Optional[Decimal] = None
    unit_cost: Optional[Money] = None
    amount: Optional[Money] = None
    type: Optional[int] = None


class Invoice(FreshBooksModel):
    id: int
    invoiceid: Optional[int] = None
    invoice_number: Optional[str] = None
    customerid: Optional[int] = None
    create_date: Optional[dt.date] = None
    due_date: Optional[dt.date] = None
    amount: Optional[Money] = None
    outstanding: Optional[Money] = None
    paid: Optional[Money] = None
    currency_code: Optional[str] = None
    status: Optional[int] = None
    v3_status: Optional[str] = None
    vis_state: Optional[VisState] = None
    lines: list[LineItem] = Field(default_factory=list)
    updated: Optional[dt.datetime] = None


class Expense(FreshBooksModel):
    id: int
    expenseid: Optional[int] = None
    amount: Optional[Money] = None
    categoryid: Optional[int] = None
    staffid: Optional[int] = None
    clientid: Optional[int] = None
    date: Optional[dt.date] = None
    vendor: Optional[str] = None
    notes: Optional[str] = None
    tax_name1: Optional[str] = Field(default=None, alias="taxName1")
    tax_amount1: Optional[Money] = Field(default=None, alias="taxAmount1")
    vis_state: Optional[VisState] = None
    updated: Optional[dt.datetime] = None


class Payment(FreshBooksModel):
    id: int
    logid: Optional[int] = None
    invoiceid: Optional[int] = None
    amount: Optional[Money] = None
    date: Optional[dt.date] = None
    type: Optional[str] = None
    note: Optional[str] = None
    vis_state: Optional[VisState] = None
    updated: Optional[dt.datetime] = None


class Tax(FreshBooksModel):
    id: int
    taxid: Optional[int] = None
    name: Optional[str] = None
    amount: Optional[Decimal] = None
    number: Optional[str] = None
    compound: Optional[bool] = None
    vis_state: Optional[VisState] = None
    updated: Optional[dt.datetime] = None


EntityT = TypeVar("EntityT", bound=FreshBooksModel)


class EntityList(BaseModel, Generic[EntityT]):
    """One page of a list call together with its pagination metadata."""

    model_config = ConfigDict(frozen=True)

    items: list[EntityT]
    page: int
    pages: int
    per_page: int
    total: int

    def __len__(self) -> int:
        return len(self.items)


class ClientList(EntityList[Client]):
    pass


class InvoiceList(EntityList[Invoice]):
    pass


class ExpenseList(EntityList[Expense]):
    pass


class PaymentList(EntityList[Payment]):
    pass


class TaxList(EntityList[Tax]):
    pass
