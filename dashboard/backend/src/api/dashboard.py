"""Dashboard overview endpoint."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from dashboard.backend.src.core.config import get_settings
from dashboard.backend.src.core.errors import DataAccessError
from dashboard.backend.src.schemas.dashboard import DashboardOverview
from dashboard.backend.src.services import data

from ..db import get_session_dependency

LOGGER = structlog.get_logger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverview)
def get_overview(session: Session = Depends(get_session_dependency)) -> DashboardOverview:
    """Return the revenue chart, latest invoices and summary cards together."""

    settings = get_settings()
    try:
        revenue = data.fetch_revenue(session)
        latest_invoices = data.fetch_latest_invoices(
            session, limit=settings.latest_invoices_limit
        )
        cards = data.fetch_card_data(session)
    except DataAccessError as exc:
        LOGGER.warning("dashboard_load_failed", operation=exc.operation)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load dashboard data.",
        ) from exc

    return DashboardOverview(
        revenue=revenue,
        latest_invoices=latest_invoices,
        cards=cards,
    )
