"""Revenue model."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from dashboard.backend.src.db.base import Base


class Revenue(Base):
    """Precomputed monthly revenue aggregate."""

    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)


__all__ = ["Revenue"]
