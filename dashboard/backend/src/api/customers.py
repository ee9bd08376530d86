"""Customer endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dashboard.backend.src.schemas.customer import CustomerField, CustomerTableRow
from dashboard.backend.src.services import data

from ..db import get_session_dependency

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerField])
def list_customers(session: Session = Depends(get_session_dependency)) -> list[CustomerField]:
    return data.fetch_customers(session)


@router.get("/table", response_model=list[CustomerTableRow])
def list_customer_table(
    query: str = "",
    session: Session = Depends(get_session_dependency),
) -> list[CustomerTableRow]:
    """Return customers matching the search query with their invoice totals."""

    return data.fetch_filtered_customers(session, query)
