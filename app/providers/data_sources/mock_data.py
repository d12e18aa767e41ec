"""Mock data source implementation."""

from __future__ import annotations

import copy
from typing import Any

from app.db.seed import default_collections
from app.interfaces.data_source import DataSource


class MockDataSource(DataSource):
    """In-memory data source holding marketplace collections."""

    def __init__(self, collections: dict[str, list[dict[str, Any]]] | None = None) -> None:
        source = default_collections() if collections is None else collections
        self._collections: dict[str, list[dict[str, Any]]] = {
            name: list(records) for name, records in source.items()
        }

    async def lookup(self, collection: str) -> list[dict[str, Any]]:
        return copy.deepcopy(self._collections.get(collection, []))

    def add_record(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        """Helper for tests/debugging; not part of DataSource contract."""
        self._collections.setdefault(collection, []).append(record)
        return record
