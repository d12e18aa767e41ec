"""FastAPI entrypoint for the marketplace chat assistant."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.v1.router import api_router
from app.core.settings import settings
from app.db.session import init_db

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if settings.data_source == "sql":
        init_db(seed=settings.seed_defaults)
        logger.info("Database ready (seed_defaults=%s).", settings.seed_defaults)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)


@app.get("/")
async def health_check() -> dict[str, str]:
    """Simple health endpoint to validate service status."""
    return {"status": "ok", "message": "Marketplace chat assistant is running"}


# Mount API v1 routes under /api/v1.
app.include_router(api_router, prefix="/api/v1")
