"""Customer model."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dashboard.backend.src.db.base import Base


class Customer(Base):
    """A billed customer shown in the invoice and customer tables."""

    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(512), nullable=False)

    invoices: Mapped[list["Invoice"]] = relationship(
        "Invoice", back_populates="customer"
    )


__all__ = ["Customer"]
