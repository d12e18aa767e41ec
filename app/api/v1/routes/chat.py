"""Chat endpoints backed by the keyword-matching assistant."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.core.chat_config import build_chat_config
from app.core.errors import CollaboratorUnavailableError, InvalidInputError
from app.core.settings import settings
from app.db.session import SessionLocal
from app.interfaces.data_source import DataSource
from app.providers.data_sources.mock_data import MockDataSource
from app.providers.data_sources.sql_data import SQLDataSource
from app.schemas.chat import ChatMessageRequest, ChatMessageResponse, SuggestionsData, SuggestionsResponse
from app.services.chat_service import ChatService

router = APIRouter()


def _build_data_source() -> DataSource:
    if settings.data_source == "mock":
        return MockDataSource()
    return SQLDataSource(session_factory=SessionLocal)


# Shared service instance; every call re-reads its collections.
chat_service = ChatService(data_source=_build_data_source(), config=build_chat_config(settings))


def get_chat_service() -> ChatService:
    return chat_service


@router.post("/message", response_model=ChatMessageResponse)
async def send_message(
    payload: ChatMessageRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatMessageResponse:
    """Answer one chat message."""
    try:
        reply = await service.process_message(payload.message)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CollaboratorUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return ChatMessageResponse(data=reply)


@router.get("/suggestions", response_model=SuggestionsResponse)
async def get_suggestions(service: ChatService = Depends(get_chat_service)) -> SuggestionsResponse:
    """Return opening suggestions for the chat widget."""
    try:
        suggestions = await service.get_suggestions()
    except CollaboratorUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return SuggestionsResponse(data=SuggestionsData(suggestions=suggestions))
