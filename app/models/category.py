"""Category model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import Boolean, Index, Integer, String, TIMESTAMP, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, JSONType
from app.db.seed import generate_id

if TYPE_CHECKING:
    from app.models.service import Service


class Category(Base):
    """Service category shown in the marketplace and matched by the chat."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_categories_slug"),
        Index("ix_categories_active", "active"),
        Index("ix_categories_order", "order"),
    )

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    icon: Mapped[str | None] = mapped_column(String(32), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    popular: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    keywords: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    created_at: Mapped[Any] = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[Any] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    services: Mapped[list["Service"]] = relationship("Service", back_populates="category_ref")

    def to_record(self) -> dict[str, Any]:
        """Return the plain mapping exposed through DataSource.lookup."""
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "icon": self.icon,
            "order": self.order,
            "active": self.active,
            "popular": self.popular,
            "keywords": list(self.keywords or []),
        }
