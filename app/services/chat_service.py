"""Chat orchestration: raw message in, structured reply out."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.chat_config import DEFAULT_CHAT_CONFIG, ChatConfig
from app.core.errors import InvalidInputError, InvalidRecordError
from app.interfaces.data_source import CATEGORIES, CHAT_RESPONSES, SERVICES, DataSource
from app.schemas.chat import (
    CategoryRef,
    CategorySummary,
    ChatReply,
    SearchResultsReply,
    ServiceSummary,
    TextReply,
)
from app.schemas.records import CategoryRecord, ChatResponseRecord, ServiceRecord
from app.services.intent_classifier import FAREWELL, GREETING, IntentClassifier
from app.services.keyword_matcher import KeywordMatcher
from app.services.response_ranker import CandidateResponse, ResponseRanker
from app.services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

Chooser = Callable[[Sequence[str]], str]
RecordT = TypeVar("RecordT", bound=BaseModel)


class ChatService:
    """Answers chat messages from canned responses and the live catalog.

    Stages run in order and the first one producing a reply wins: greeting,
    farewell, best canned response, category/service search, default fallback.
    Canned responses are ranked by score; categories and services only pass a
    boolean keyword gate and keep their collection order.
    """

    def __init__(
        self,
        data_source: DataSource,
        config: ChatConfig = DEFAULT_CHAT_CONFIG,
        *,
        matcher: KeywordMatcher | None = None,
        classifier: IntentClassifier | None = None,
        ranker: ResponseRanker | None = None,
        chooser: Chooser = random.choice,
    ) -> None:
        self.data_source = data_source
        self.config = config
        self.matcher = matcher or KeywordMatcher(config)
        self.classifier = classifier or IntentClassifier(config)
        self.ranker = ranker or ResponseRanker(self.matcher)
        self.chooser = chooser

    async def process_message(self, message: Any) -> ChatReply:
        """Return the chat reply for one raw user message."""
        if not isinstance(message, str) or not message.strip():
            raise InvalidInputError("Se requiere un mensaje válido")

        normalized_message = normalize_text(message)

        intent = self.classifier.classify(normalized_message)
        if intent == GREETING:
            return TextReply(
                message=self.chooser(self.config.greeting_responses),
                suggestions=self._default_suggestions(),
            )
        if intent == FAREWELL:
            return TextReply(message=self.chooser(self.config.farewell_responses), suggestions=[])

        chat_responses = await self._load(CHAT_RESPONSES, ChatResponseRecord)
        categories = await self._load(CATEGORIES, CategoryRecord)
        services = await self._load(SERVICES, ServiceRecord)

        canned_reply = self._reply_from_canned_responses(normalized_message, chat_responses, categories, services)
        if canned_reply is not None:
            return canned_reply

        matched_categories = self.ranker.gate(
            categories,
            lambda category: self._category_matches(normalized_message, category),
            limit=self.config.max_categories,
        )
        matched_services = self.ranker.gate(
            services,
            lambda service: self._service_matches(normalized_message, service),
            limit=self.config.max_services,
        )
        if matched_categories or matched_services:
            logger.info(
                "Search matched %s categories and %s services.",
                len(matched_categories),
                len(matched_services),
            )
            return SearchResultsReply(
                message=self.config.search_results_message,
                categories=[_category_summary(category) for category in matched_categories],
                services=[_service_summary(service, categories) for service in matched_services],
                suggestions=self._search_suggestions(matched_categories),
            )

        logger.info("No match for chat message; using default response.")
        return TextReply(
            message=self.chooser(self.config.default_responses),
            suggestions=self._default_suggestions(),
        )

    async def get_suggestions(self) -> list[str]:
        """Return opening suggestions led by popular active categories."""
        categories = await self._load(CATEGORIES, CategoryRecord)
        popular = [
            self.config.popular_suggestion_template.format(name=category.name)
            for category in categories
            if category.active and category.popular
        ][:3]
        return [*popular, *self.config.default_suggestions][: self.config.max_suggestions]

    def _reply_from_canned_responses(
        self,
        message: str,
        chat_responses: list[ChatResponseRecord],
        categories: list[CategoryRecord],
        services: list[ServiceRecord],
    ) -> ChatReply | None:
        candidates = [
            CandidateResponse(subject=response, keywords=tuple(response.keywords), priority=response.priority)
            for response in chat_responses
            if response.active
        ]
        best = self.ranker.best(candidates, message, min_score=self.config.canned_response_min_score)
        if best is None:
            return None

        response = best.candidate.subject
        logger.info("Canned response %s selected with score %.2f.", response.id, best.score)
        suggestions = (response.suggestions or list(self.config.default_suggestions))[: self.config.max_suggestions]

        categories_by_id = {category.id: category for category in categories}
        services_by_id = {service.id: service for service in services}
        related_categories = [
            _category_summary(categories_by_id[category_id])
            for category_id in response.category_ids
            if category_id in categories_by_id and categories_by_id[category_id].active
        ][: self.config.max_categories]
        related_services = [
            _service_summary(services_by_id[service_id], categories)
            for service_id in response.service_ids
            if service_id in services_by_id and services_by_id[service_id].active
        ][: self.config.max_services]

        if related_categories or related_services:
            return SearchResultsReply(
                message=response.text,
                categories=related_categories,
                services=related_services,
                suggestions=suggestions,
            )
        return TextReply(message=response.text, suggestions=suggestions)

    def _category_matches(self, message: str, category: CategoryRecord) -> bool:
        if not category.active:
            return False
        name = normalize_text(category.name)
        if name and name in message:
            return True
        return self.matcher.has_keywords(message, category.keywords)

    def _service_matches(self, message: str, service: ServiceRecord) -> bool:
        if not service.active:
            return False
        title = normalize_text(service.title)
        if title and title in message:
            return True
        if service.keywords:
            return self.matcher.has_keywords(message, service.keywords)
        # Tags only decide for services without keywords.
        return any(_contains(message, tag) for tag in service.tags)

    def _search_suggestions(self, matched_categories: list[CategoryRecord]) -> list[str]:
        if not matched_categories:
            return self._default_suggestions()
        suggestions = [
            self.config.category_suggestion_template.format(name=category.name)
            for category in matched_categories[:2]
        ]
        suggestions.extend(self.config.default_suggestions[:2])
        return suggestions[: self.config.max_suggestions]

    def _default_suggestions(self) -> list[str]:
        return list(self.config.default_suggestions[: self.config.max_suggestions])

    async def _load(self, collection: str, record_type: type[RecordT]) -> list[RecordT]:
        records = await self.data_source.lookup(collection)
        try:
            return [record_type.model_validate(record) for record in records or []]
        except ValidationError as exc:
            raise InvalidRecordError(collection, str(exc)) from exc


def _contains(message: str, phrase: str) -> bool:
    normalized = normalize_text(phrase)
    return bool(normalized) and normalized in message


def _category_summary(category: CategoryRecord) -> CategorySummary:
    return CategorySummary(
        id=category.id,
        name=category.name,
        description=category.description,
        icon=category.icon,
    )


def _service_summary(service: ServiceRecord, categories: list[CategoryRecord]) -> ServiceSummary:
    category = next((item for item in categories if item.id == service.category), None)
    return ServiceSummary(
        id=service.id,
        title=service.title,
        description=service.description,
        price=service.price,
        category=CategoryRef(id=category.id, name=category.name) if category is not None else None,
    )
