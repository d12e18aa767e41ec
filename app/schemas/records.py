"""Typed records read from the storage boundary, one per collection."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoredRecord(BaseModel):
    """Base for collection records: unknown keys ignored, camelCase aliases accepted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # None falls through to the required str check.
        return value if value is None else str(value)


class CategoryRecord(StoredRecord):
    """Service category."""

    id: str
    name: str
    slug: str = ""
    description: str | None = None
    icon: str | None = None
    order: int = 0
    active: bool = True
    popular: bool = False
    keywords: list[str] = Field(default_factory=list)

    @field_validator("keywords", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ServiceRecord(StoredRecord):
    """Service offered by a provider."""

    id: str
    title: str
    description: str | None = None
    price: float = Field(default=0, ge=0)
    category: str | None = None
    provider: str | None = None
    active: bool = True
    keywords: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @field_validator("category", "provider", mode="before")
    @classmethod
    def _reference_as_str(cls, value: Any) -> Any:
        # Populated references arrive as mappings carrying their own id.
        if isinstance(value, dict):
            value = value.get("id")
        return None if value is None else str(value)

    @field_validator("keywords", "tags", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ChatResponseRecord(StoredRecord):
    """Operator-authored canned reply with its own keyword triggers."""

    id: str
    keywords: list[str] = Field(default_factory=list)
    text: str = Field(default="", max_length=1000)
    suggestions: list[str] | None = None
    service_ids: list[str] = Field(default_factory=list, alias="serviceIds")
    category_ids: list[str] = Field(default_factory=list, alias="categoryIds")
    priority: float = Field(default=1.0, ge=0)
    active: bool = True

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, value: Any) -> Any:
        return value or 1.0

    @field_validator("keywords", "service_ids", "category_ids", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return [str(item) for item in value] if isinstance(value, list) else value
