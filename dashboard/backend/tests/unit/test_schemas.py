"""Tests for the invoice response records."""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest
from pydantic import ValidationError

from dashboard.backend.src.schemas.invoice import InvoiceForm, InvoiceTableRow


def _table_row(**overrides):  # type: ignore[no-untyped-def]
    values = {
        "id": "inv-1",
        "amount": 15795,
        "date": date(2023, 7, 16),
        "status": "pending",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    }
    values.update(overrides)
    return InvoiceTableRow(**values)


def test_invoice_form_amount_is_a_json_number() -> None:
    form = InvoiceForm(
        id="inv-1", customer_id="cust-1", amount=Decimal("2500.00"), status="paid"
    )

    assert form.amount == Decimal("2500")
    assert form.model_dump()["amount"] == Decimal("2500")
    assert form.model_dump(mode="json")["amount"] == 2500
    assert '"amount":2500.0' in form.model_dump_json()


def test_invoice_table_row_keeps_cents_and_formats_display_value() -> None:
    row = _table_row()

    dumped = row.model_dump(mode="json")
    assert dumped["amount"] == 15795
    assert dumped["formatted_amount"] == "$157.95"
    assert dumped["status"] == "pending"


@pytest.mark.parametrize("model", ["table_row", "form"])
def test_invoice_records_reject_unknown_status(model: str) -> None:
    with pytest.raises(ValidationError):
        if model == "table_row":
            _table_row(status="overdue")
        else:
            InvoiceForm(id="inv-1", customer_id="cust-1", amount=Decimal("1"), status="overdue")
