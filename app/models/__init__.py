"""Domain models package."""

from app.models.category import Category
from app.models.chat_response import ChatResponse
from app.models.service import Service

__all__ = [
    "Category",
    "Service",
    "ChatResponse",
]
