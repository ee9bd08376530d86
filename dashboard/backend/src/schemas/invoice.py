"""Invoice schemas."""

from __future__ import annotations

import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, PlainSerializer, computed_field

from dashboard.backend.src.services.currency import (
    Cents,
    CurrencyUnits,
    FormattedCurrency,
    format_currency,
)

InvoiceStatus = Literal["pending", "paid"]

# JSON clients get a number, never the string pydantic emits for Decimal.
JsonCurrencyUnits = Annotated[
    CurrencyUnits, PlainSerializer(float, return_type=float, when_used="json")
]


class InvoiceTableRow(BaseModel):
    """Row of the paginated invoices table.

    ``amount`` stays in cents; ``formatted_amount`` is the display value.
    """

    id: str
    amount: Cents
    date: datetime.date
    status: InvoiceStatus
    name: str
    email: str
    image_url: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def formatted_amount(self) -> FormattedCurrency:
        return format_currency(self.amount)


class InvoiceForm(BaseModel):
    """Single invoice loaded for the edit form. ``amount`` is in display units."""

    id: str
    customer_id: str
    amount: JsonCurrencyUnits
    status: InvoiceStatus


class InvoicePages(BaseModel):
    total_pages: int
