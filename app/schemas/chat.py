"""Schemas for chat endpoints and chat replies."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class CategorySummary(BaseModel):
    id: str
    name: str
    description: str | None = None
    icon: str | None = None


class CategoryRef(BaseModel):
    id: str
    name: str


class ServiceSummary(BaseModel):
    id: str
    title: str
    description: str | None = None
    price: float
    category: CategoryRef | None = None


class TextReply(BaseModel):
    """Plain text reply with follow-up suggestions."""

    type: Literal["text"] = "text"
    message: str
    suggestions: list[str] = Field(default_factory=list)


class SearchResultsReply(BaseModel):
    """Reply carrying matched categories and services."""

    type: Literal["search_results"] = "search_results"
    message: str
    categories: list[CategorySummary] = Field(default_factory=list)
    services: list[ServiceSummary] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


ChatReply = Annotated[Union[TextReply, SearchResultsReply], Field(discriminator="type")]


class ChatMessageRequest(BaseModel):
    """Request body for /chat/message."""

    # Left untyped so the chat service reports non-string messages itself.
    message: Any = Field(default=None, description="Inbound user message", examples=["Necesito un sitio web"])


class ChatMessageResponse(BaseModel):
    """Response payload for /chat/message."""

    success: bool = True
    data: ChatReply


class SuggestionsData(BaseModel):
    suggestions: list[str]


class SuggestionsResponse(BaseModel):
    """Response payload for /chat/suggestions."""

    success: bool = True
    data: SuggestionsData
