"""Interface contract for data source providers."""

from abc import ABC, abstractmethod
from typing import Any

CATEGORIES = "categories"
SERVICES = "services"
CHAT_RESPONSES = "chatResponses"

COLLECTIONS = (CATEGORIES, SERVICES, CHAT_RESPONSES)


class DataSource(ABC):
    """Defines read access to the marketplace collections used by the chat."""

    @abstractmethod
    async def lookup(self, collection: str) -> list[dict[str, Any]]:
        """Return every record of a collection, or an empty list for unknown collections."""
        raise NotImplementedError
