"""Service model."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    Index,
    Numeric,
    String,
    TIMESTAMP,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, JSONType
from app.db.seed import generate_id

if TYPE_CHECKING:
    from app.models.category import Category


class Service(Base):
    """Service offered by a provider inside a category."""

    __tablename__ = "services"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
        Index("ix_services_category", "category"),
        Index("ix_services_provider", "provider"),
        Index("ix_services_active", "active"),
    )

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_id)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str | None] = mapped_column(
        String(24),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    provider: Mapped[str | None] = mapped_column(String(64), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0.00"))
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    keywords: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    tags: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    created_at: Mapped[Any] = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[Any] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    category_ref: Mapped["Category | None"] = relationship("Category", back_populates="services")

    def to_record(self) -> dict[str, Any]:
        """Return the plain mapping exposed through DataSource.lookup."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "price": float(self.price) if self.price is not None else 0.0,
            "category": self.category,
            "provider": self.provider,
            "active": self.active,
            "keywords": list(self.keywords or []),
            "tags": list(self.tags or []),
        }
