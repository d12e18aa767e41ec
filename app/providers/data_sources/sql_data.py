"""SQLAlchemy-backed data source implementation."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.errors import CollaboratorUnavailableError
from app.interfaces.data_source import CATEGORIES, CHAT_RESPONSES, SERVICES, DataSource
from app.models import Category, ChatResponse, Service

logger = logging.getLogger(__name__)


class SQLDataSource(DataSource):
    """Reads marketplace collections from the relational store, one session per lookup."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self._statements = {
            CATEGORIES: select(Category).order_by(Category.order, Category.created_at, Category.id),
            SERVICES: select(Service).order_by(Service.created_at, Service.id),
            CHAT_RESPONSES: select(ChatResponse).order_by(ChatResponse.created_at, ChatResponse.id),
        }

    async def lookup(self, collection: str) -> list[dict[str, Any]]:
        statement = self._statements.get(collection)
        if statement is None:
            logger.warning("Lookup for unknown collection '%s'.", collection)
            return []

        try:
            with self.session_factory() as db:
                rows = db.scalars(statement).all()
                return [row.to_record() for row in rows]
        except SQLAlchemyError as exc:
            logger.exception("Lookup for collection '%s' failed.", collection)
            raise CollaboratorUnavailableError(f"Collection '{collection}' is unavailable.") from exc
