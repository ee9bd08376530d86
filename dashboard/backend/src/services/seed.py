"""Utilities for seeding development data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import Session

from dashboard.backend.src.models import Customer, Invoice, Revenue

DEMO_CUSTOMERS: list[dict[str, str]] = [
    {
        "id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        "name": "Evil Rabbit",
        "email": "evil@rabbit.com",
        "image_url": "/customers/evil-rabbit.png",
    },
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
]

# (customer index, amount in cents, status, date)
DEMO_INVOICES: list[tuple[int, int, str, date]] = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (3, 3040, "paid", date(2022, 10, 29)),
    (2, 44800, "paid", date(2023, 9, 10)),
    (0, 34577, "pending", date(2023, 8, 5)),
    (1, 54246, "pending", date(2023, 7, 16)),
    (3, 666, "pending", date(2023, 6, 27)),
    (2, 32545, "paid", date(2023, 6, 9)),
    (0, 1250, "paid", date(2023, 6, 17)),
    (1, 8546, "paid", date(2023, 6, 7)),
    (3, 500, "paid", date(2023, 8, 19)),
    (2, 8945, "paid", date(2023, 6, 3)),
    (0, 1000, "paid", date(2022, 6, 5)),
]

DEMO_REVENUE: list[tuple[str, int]] = [
    ("Jan", 2000),
    ("Feb", 1800),
    ("Mar", 2200),
    ("Apr", 2500),
    ("May", 2300),
    ("Jun", 3200),
    ("Jul", 3500),
    ("Aug", 3700),
    ("Sep", 2500),
    ("Oct", 2800),
    ("Nov", 3000),
    ("Dec", 4800),
]


@dataclass
class SeedResult:
    """Counts of the rows inserted by :func:`seed_demo_data`."""

    customers_created: int
    invoices_created: int
    revenue_created: int


def seed_demo_data(session: Session) -> SeedResult:
    """Insert demo customers, invoices and revenue rows into empty tables.

    Tables that already hold rows are left untouched. Demo invoices are only
    inserted while every demo customer they reference is present.
    """

    customers_created = 0
    invoices_created = 0
    revenue_created = 0

    if session.query(Customer).first() is None:
        session.add_all(Customer(**values) for values in DEMO_CUSTOMERS)
        session.flush()
        customers_created = len(DEMO_CUSTOMERS)

    demo_customer_ids = [values["id"] for values in DEMO_CUSTOMERS]
    present = {
        customer_id
        for (customer_id,) in session.query(Customer.id).filter(
            Customer.id.in_(demo_customer_ids)
        )
    }

    if session.query(Invoice).first() is None and present == set(demo_customer_ids):
        session.add_all(
            Invoice(
                customer_id=DEMO_CUSTOMERS[index]["id"],
                amount=amount,
                status=status,
                date=invoice_date,
            )
            for index, amount, status, invoice_date in DEMO_INVOICES
        )
        session.flush()
        invoices_created = len(DEMO_INVOICES)

    if session.query(Revenue).first() is None:
        session.add_all(
            Revenue(month=month, revenue=revenue) for month, revenue in DEMO_REVENUE
        )
        session.flush()
        revenue_created = len(DEMO_REVENUE)

    return SeedResult(
        customers_created=customers_created,
        invoices_created=invoices_created,
        revenue_created=revenue_created,
    )


__all__ = ["SeedResult", "seed_demo_data"]
