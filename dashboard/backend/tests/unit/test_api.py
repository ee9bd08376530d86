"""Integration-flavored smoke tests for the FastAPI app."""

from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

# Configure environment before application imports
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_dashboard.db")

import pytest
from fastapi.testclient import TestClient

from dashboard.backend.src.core.errors import DataAccessError
from dashboard.backend.src.db import get_engine, session_scope
from dashboard.backend.src.db.base import Base
from dashboard.backend.src.main import app
from dashboard.backend.src.models import Customer, Invoice, Revenue
from dashboard.backend.src.services import data


@pytest.fixture(autouse=True)
def setup_database() -> None:  # type: ignore[no-untyped-def]
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def invoice_ids() -> dict[str, str]:
    with session_scope() as session:
        customer = Customer(
            name="Lee Robinson",
            email="lee@robinson.com",
            image_url="/customers/lee-robinson.png",
        )
        session.add(customer)
        session.flush()

        paid = Invoice(
            customer_id=customer.id, amount=250000, status="paid", date=date(2023, 6, 9)
        )
        pending = Invoice(
            customer_id=customer.id, amount=15795, status="pending", date=date(2023, 7, 16)
        )
        session.add_all([paid, pending, Revenue(month="Jun", revenue=3200)])
        session.flush()

        return {"customer": customer.id, "paid": paid.id, "pending": pending.id}


def test_liveness_endpoint(client: TestClient) -> None:
    response = client.get("/api/health/live")
    assert response.status_code == 200
    assert response.json()["status"] == "live"


def test_readiness_endpoint(client: TestClient) -> None:
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": "sqlite"}


def test_dashboard_overview(client: TestClient, invoice_ids: dict[str, str]) -> None:
    response = client.get("/api/dashboard/overview")
    assert response.status_code == 200, response.text

    payload = response.json()
    assert payload["revenue"] == [{"month": "Jun", "revenue": 3200}]
    assert [row["id"] for row in payload["latest_invoices"]] == [
        invoice_ids["pending"],
        invoice_ids["paid"],
    ]
    assert payload["latest_invoices"][0]["amount"] == "$157.95"
    assert payload["cards"] == {
        "number_of_invoices": 2,
        "number_of_customers": 1,
        "total_paid_invoices": "$2,500.00",
        "total_pending_invoices": "$157.95",
    }


def test_dashboard_overview_fetches_card_data_once(
    client: TestClient, invoice_ids: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[int] = []
    original = data.fetch_card_data

    def counting_fetch_card_data(session):  # type: ignore[no-untyped-def]
        calls.append(1)
        return original(session)

    monkeypatch.setattr(data, "fetch_card_data", counting_fetch_card_data)

    response = client.get("/api/dashboard/overview")
    assert response.status_code == 200, response.text
    assert len(calls) == 1


def test_dashboard_overview_reports_generic_failure(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_fetch_revenue(session):  # type: ignore[no-untyped-def]
        raise DataAccessError("Failed to fetch revenue data.", operation="fetch_revenue")

    monkeypatch.setattr(data, "fetch_revenue", failing_fetch_revenue)

    response = client.get("/api/dashboard/overview")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to load dashboard data."}


def test_list_invoices_and_pages(client: TestClient, invoice_ids: dict[str, str]) -> None:
    response = client.get("/api/invoices", params={"query": "PAID", "page": 1})
    assert response.status_code == 200, response.text
    rows = response.json()
    assert [row["id"] for row in rows] == [invoice_ids["paid"]]
    assert rows[0]["amount"] == 250000
    assert rows[0]["formatted_amount"] == "$2,500.00"
    assert rows[0]["date"] == "2023-06-09"

    pages = client.get("/api/invoices/pages", params={"query": "nothing-matches"})
    assert pages.status_code == 200
    assert pages.json() == {"total_pages": 1}


def test_list_invoices_rejects_page_zero(client: TestClient) -> None:
    response = client.get("/api/invoices", params={"page": 0})
    assert response.status_code == 422


def test_get_invoice_returns_display_units(
    client: TestClient, invoice_ids: dict[str, str]
) -> None:
    response = client.get(f"/api/invoices/{invoice_ids['paid']}")
    assert response.status_code == 200, response.text
    payload = response.json()
    assert payload["customer_id"] == invoice_ids["customer"]
    assert isinstance(payload["amount"], (int, float))
    assert payload["amount"] == 2500
    assert payload["status"] == "paid"


def test_get_missing_invoice_returns_404(client: TestClient) -> None:
    response = client.get("/api/invoices/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"detail": "Invoice not found."}


def test_customer_endpoints(client: TestClient, invoice_ids: dict[str, str]) -> None:
    listing = client.get("/api/customers")
    assert listing.status_code == 200
    assert listing.json() == [{"id": invoice_ids["customer"], "name": "Lee Robinson"}]

    table = client.get("/api/customers/table", params={"query": "robinson"})
    assert table.status_code == 200
    row = table.json()[0]
    assert row["total_invoices"] == 2
    assert row["total_paid"] == "$2,500.00"
    assert row["total_pending"] == "$157.95"


def test_store_failure_hides_driver_error(
    client: TestClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_fetch_customers(session):  # type: ignore[no-untyped-def]
        raise DataAccessError("Failed to fetch all customers.", operation="fetch_customers")

    monkeypatch.setattr(data, "fetch_customers", failing_fetch_customers)

    response = client.get("/api/customers")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to fetch all customers."}


def test_metrics_endpoint_exposes_data_access_counters(
    client: TestClient, invoice_ids: dict[str, str]
) -> None:
    client.get("/api/customers")

    response = client.get("/api/metrics")
    assert response.status_code == 200
    assert "data_access_queries_total" in response.text
