"""Customer schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dashboard.backend.src.services.currency import FormattedCurrency


class CustomerField(BaseModel):
    """Minimal customer projection used by select inputs."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CustomerTableRow(BaseModel):
    """Customer with invoice totals for the customers table."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: FormattedCurrency
    total_paid: FormattedCurrency
