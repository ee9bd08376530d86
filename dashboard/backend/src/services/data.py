"""Read-only queries backing the dashboard pages.

Every function receives the session it should use, issues a single query and
returns presentation-ready records. Store failures are logged and re-raised
as :class:`DataAccessError` carrying a fixed message; the driver error is
chained but never part of the message.
"""

from __future__ import annotations

import math
import time
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy import String, case, cast, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from dashboard.backend.src.core.errors import DataAccessError, NotFoundError
from dashboard.backend.src.models import Customer, Invoice, Revenue
from dashboard.backend.src.schemas.customer import CustomerField, CustomerTableRow
from dashboard.backend.src.schemas.dashboard import (
    CardData,
    LatestInvoice,
    MonthlyRevenue,
)
from dashboard.backend.src.schemas.invoice import InvoiceForm, InvoiceTableRow
from dashboard.backend.src.services.currency import cents_to_units, format_currency
from dashboard.backend.src.services.metrics import (
    data_access_queries_total,
    data_access_query_seconds,
)

LOGGER = structlog.get_logger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


@contextmanager
def _store_call(operation: str, message: str) -> Iterator[None]:
    """Translate store failures raised inside the block into ``DataAccessError``."""

    started = time.perf_counter()
    outcome = "error"
    try:
        yield
        outcome = "success"
    except NotFoundError:
        outcome = "not_found"
        raise
    except SQLAlchemyError as exc:
        LOGGER.error("database_error", operation=operation, error=str(exc))
        raise DataAccessError(message, operation=operation) from exc
    finally:
        data_access_queries_total.labels(operation=operation, outcome=outcome).inc()
        data_access_query_seconds.labels(operation=operation).observe(
            time.perf_counter() - started
        )


def _search_pattern(query: str | None) -> str:
    return f"%{query or ''}%"


def _invoice_search_clause(query: str | None) -> ColumnElement[bool]:
    """Case-insensitive substring match across customer and invoice fields."""

    pattern = _search_pattern(query)
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, String).ilike(pattern),
        cast(Invoice.date, String).ilike(pattern),
        Invoice.status.ilike(pattern),
    )


def _sum_for_status(status: str) -> ColumnElement:
    return func.sum(case((Invoice.status == status, Invoice.amount), else_=0))


def fetch_revenue(session: Session) -> list[MonthlyRevenue]:
    """Return every revenue row as stored."""

    with _store_call("fetch_revenue", "Failed to fetch revenue data."):
        rows = session.query(Revenue).all()
    return [MonthlyRevenue.model_validate(row) for row in rows]


def fetch_latest_invoices(
    session: Session, limit: int = LATEST_INVOICES_LIMIT
) -> list[LatestInvoice]:
    """Return the most recent invoices with their customer details."""

    with _store_call("fetch_latest_invoices", "Failed to fetch the latest invoices."):
        rows = (
            session.query(
                Invoice.amount,
                Customer.name,
                Customer.image_url,
                Customer.email,
                Invoice.id,
            )
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(limit)
            .all()
        )

    return [
        LatestInvoice(
            id=row.id,
            name=row.name,
            image_url=row.image_url,
            email=row.email,
            amount=format_currency(row.amount),
        )
        for row in rows
    ]


def fetch_card_data(session: Session) -> CardData:
    """Return invoice and customer counts with paid and pending totals."""

    customer_count = select(func.count(Customer.id)).scalar_subquery()

    with _store_call("fetch_card_data", "Failed to fetch card data."):
        row = (
            session.query(
                func.count(Invoice.id).label("invoice_count"),
                customer_count.label("customer_count"),
                _sum_for_status("paid").label("paid"),
                _sum_for_status("pending").label("pending"),
            )
            .select_from(Invoice)
            .one()
        )

    return CardData(
        number_of_invoices=int(row.invoice_count or 0),
        number_of_customers=int(row.customer_count or 0),
        total_paid_invoices=format_currency(row.paid or 0),
        total_pending_invoices=format_currency(row.pending or 0),
    )


def fetch_filtered_invoices(
    session: Session,
    query: str,
    page: int,
    page_size: int = ITEMS_PER_PAGE,
) -> list[InvoiceTableRow]:
    """Return one page of invoices matching ``query``, newest first.

    ``page`` is 1-indexed. The offset is passed to the store as computed.
    """

    offset = (page - 1) * page_size

    with _store_call("fetch_filtered_invoices", "Failed to fetch invoices."):
        rows = (
            session.query(
                Invoice.id,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
                Customer.name,
                Customer.email,
                Customer.image_url,
            )
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(_invoice_search_clause(query))
            .order_by(Invoice.date.desc(), Invoice.id.desc())
            .limit(page_size)
            .offset(offset)
            .all()
        )

    return [
        InvoiceTableRow(
            id=row.id,
            amount=row.amount or 0,
            date=row.date,
            status=row.status,
            name=row.name,
            email=row.email,
            image_url=row.image_url,
        )
        for row in rows
    ]


def fetch_invoices_pages(session: Session, query: str, page_size: int = ITEMS_PER_PAGE) -> int:
    """Return the number of pages of invoices matching ``query`` (at least 1)."""

    with _store_call(
        "fetch_invoices_pages", "Failed to fetch total number of invoices."
    ):
        count = (
            session.query(func.count(Invoice.id))
            .select_from(Invoice)
            .join(Customer, Invoice.customer_id == Customer.id)
            .filter(_invoice_search_clause(query))
            .scalar()
        )

    return max(1, math.ceil(int(count or 0) / page_size))


def fetch_invoice_by_id(session: Session, invoice_id: str) -> InvoiceForm:
    """Return a single invoice with its amount converted to display units."""

    with _store_call("fetch_invoice_by_id", "Failed to fetch invoice."):
        row = (
            session.query(
                Invoice.id,
                Invoice.customer_id,
                Invoice.amount,
                Invoice.status,
            )
            .filter(Invoice.id == invoice_id)
            .one_or_none()
        )
        if row is None:
            LOGGER.info("invoice_not_found", invoice_id=invoice_id)
            raise NotFoundError("Invoice not found.", operation="fetch_invoice_by_id")

    return InvoiceForm(
        id=row.id,
        customer_id=row.customer_id,
        amount=cents_to_units(row.amount),
        status=row.status,
    )


def fetch_customers(session: Session) -> list[CustomerField]:
    """Return all customers ordered by name."""

    with _store_call("fetch_customers", "Failed to fetch all customers."):
        rows = (
            session.query(Customer.id, Customer.name)
            .order_by(Customer.name.asc())
            .all()
        )
    return [CustomerField(id=row.id, name=row.name) for row in rows]


def fetch_filtered_customers(session: Session, query: str) -> list[CustomerTableRow]:
    """Return customers matching ``query`` by name or email with invoice totals."""

    pattern = _search_pattern(query)
    total_pending = func.coalesce(_sum_for_status("pending"), 0)
    total_paid = func.coalesce(_sum_for_status("paid"), 0)

    with _store_call("fetch_filtered_customers", "Failed to fetch customer table."):
        rows = (
            session.query(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                total_pending.label("total_pending"),
                total_paid.label("total_paid"),
            )
            .select_from(Customer)
            .outerjoin(Invoice, Customer.id == Invoice.customer_id)
            .filter(or_(Customer.name.ilike(pattern), Customer.email.ilike(pattern)))
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
            .order_by(Customer.name.asc())
            .all()
        )

    return [
        CustomerTableRow(
            id=row.id,
            name=row.name,
            email=row.email,
            image_url=row.image_url,
            total_invoices=int(row.total_invoices or 0),
            total_pending=format_currency(row.total_pending),
            total_paid=format_currency(row.total_paid),
        )
        for row in rows
    ]


__all__ = [
    "ITEMS_PER_PAGE",
    "LATEST_INVOICES_LIMIT",
    "fetch_card_data",
    "fetch_customers",
    "fetch_filtered_customers",
    "fetch_filtered_invoices",
    "fetch_invoice_by_id",
    "fetch_invoices_pages",
    "fetch_latest_invoices",
    "fetch_revenue",
]
