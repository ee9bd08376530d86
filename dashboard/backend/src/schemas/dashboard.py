"""Dashboard overview schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from dashboard.backend.src.services.currency import FormattedCurrency


class MonthlyRevenue(BaseModel):
    """One month of the revenue chart."""

    month: str
    revenue: int

    model_config = ConfigDict(from_attributes=True)


class LatestInvoice(BaseModel):
    """Row of the latest invoices card."""

    id: str
    name: str
    image_url: str
    email: str
    amount: FormattedCurrency


class CardData(BaseModel):
    """Totals shown on the dashboard summary cards."""

    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: FormattedCurrency
    total_pending_invoices: FormattedCurrency


class DashboardOverview(BaseModel):
    revenue: list[MonthlyRevenue]
    latest_invoices: list[LatestInvoice]
    cards: CardData
