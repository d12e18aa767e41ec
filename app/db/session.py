"""Database engine, session factory and schema bootstrap."""

import logging
from collections.abc import Generator

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.settings import settings
from app.db.base import Base
from app.db.seed import default_collections
from app.interfaces.data_source import CATEGORIES, CHAT_RESPONSES
from app.models import Category, ChatResponse

logger = logging.getLogger(__name__)

engine = create_engine(settings.database_url, pool_pre_ping=True)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it after use."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None, *, seed: bool = True) -> None:
    """Create missing tables and seed the default catalog into empty ones."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    if not seed:
        return

    factory = sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)
    with factory() as db:
        try:
            seed_defaults(db)
            db.commit()
        except Exception:
            db.rollback()
            raise


def seed_defaults(db: Session) -> None:
    """Insert default categories and canned responses when their tables are empty."""
    defaults = default_collections()

    if db.scalar(select(func.count()).select_from(Category)) == 0:
        for record in defaults[CATEGORIES]:
            db.add(Category(**record))
        logger.info("Seeded %s default categories.", len(defaults[CATEGORIES]))

    if db.scalar(select(func.count()).select_from(ChatResponse)) == 0:
        for record in defaults[CHAT_RESPONSES]:
            db.add(
                ChatResponse(
                    id=record["id"],
                    keywords=record["keywords"],
                    text=record["text"],
                    suggestions=record["suggestions"],
                    priority=record["priority"],
                    active=record["active"],
                )
            )
        logger.info("Seeded %s default chat responses.", len(defaults[CHAT_RESPONSES]))
