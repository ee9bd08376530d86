"""Invoice table and detail endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dashboard.backend.src.core.config import get_settings
from dashboard.backend.src.schemas.invoice import (
    InvoiceForm,
    InvoicePages,
    InvoiceTableRow,
)
from dashboard.backend.src.services import data

from ..db import get_session_dependency

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.get("", response_model=list[InvoiceTableRow])
def list_invoices(
    query: str = "",
    page: int = Query(default=1, ge=1),
    session: Session = Depends(get_session_dependency),
) -> list[InvoiceTableRow]:
    """Return one page of invoices matching the search query."""

    return data.fetch_filtered_invoices(
        session, query, page, page_size=get_settings().items_per_page
    )


@router.get("/pages", response_model=InvoicePages)
def count_invoice_pages(
    query: str = "",
    session: Session = Depends(get_session_dependency),
) -> InvoicePages:
    """Return how many pages the search query spans."""

    total_pages = data.fetch_invoices_pages(
        session, query, page_size=get_settings().items_per_page
    )
    return InvoicePages(total_pages=total_pages)


@router.get("/{invoice_id}", response_model=InvoiceForm)
def get_invoice(
    invoice_id: str,
    session: Session = Depends(get_session_dependency),
) -> InvoiceForm:
    return data.fetch_invoice_by_id(session, invoice_id)
