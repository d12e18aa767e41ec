"""Canned chat response model."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, CheckConstraint, Float, Index, String, TIMESTAMP, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JSONType
from app.db.seed import generate_id


class ChatResponse(Base):
    """Operator-authored reply triggered by keywords."""

    __tablename__ = "chat_responses"
    __table_args__ = (
        CheckConstraint("priority >= 0", name="ck_chat_responses_priority_non_negative"),
        Index("ix_chat_responses_active", "active"),
    )

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_id)
    keywords: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    text: Mapped[str] = mapped_column(String(1000), nullable=False)
    suggestions: Mapped[list[str] | None] = mapped_column(JSONType, nullable=True)
    service_ids: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    category_ids: Mapped[list[str]] = mapped_column(JSONType, nullable=False, default=list)
    priority: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[Any] = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[Any] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_record(self) -> dict[str, Any]:
        """Return the plain mapping exposed through DataSource.lookup."""
        return {
            "id": self.id,
            "keywords": list(self.keywords or []),
            "text": self.text,
            "suggestions": list(self.suggestions) if self.suggestions is not None else None,
            "serviceIds": list(self.service_ids or []),
            "categoryIds": list(self.category_ids or []),
            "priority": self.priority,
            "active": self.active,
        }
