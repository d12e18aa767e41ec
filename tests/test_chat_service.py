"""Unit tests for the ChatService orchestration flow."""

from __future__ import annotations

import unittest
from collections.abc import Sequence
from typing import Any

from app.core.chat_config import (
    DEFAULT_RESPONSES,
    DEFAULT_SUGGESTIONS,
    GREETING_RESPONSES,
    ChatConfig,
    build_chat_config,
)
from app.core.errors import CollaboratorUnavailableError, InvalidInputError, InvalidRecordError
from app.core.settings import Settings
from app.interfaces.data_source import DataSource
from app.providers.data_sources.mock_data import MockDataSource
from app.services.chat_service import ChatService


def first_choice(options: Sequence[str]) -> str:
    return options[0]


class FailingDataSource(DataSource):
    """Data source whose storage is always down."""

    async def lookup(self, collection: str) -> list[dict[str, Any]]:
        raise CollaboratorUnavailableError(f"Collection '{collection}' is unavailable.")


class RecordingDataSource(MockDataSource):
    """In-memory data source that records every collection lookup."""

    def __init__(self, collections: dict[str, list[dict[str, Any]]]) -> None:
        super().__init__(collections=collections)
        self.lookups: list[str] = []

    async def lookup(self, collection: str) -> list[dict[str, Any]]:
        self.lookups.append(collection)
        return await super().lookup(collection)


def build_collections() -> dict[str, list[dict[str, Any]]]:
    return {
        "categories": [
            {
                "id": "cat-web",
                "name": "Web Development",
                "slug": "web-development",
                "description": "Sitios y aplicaciones web",
                "icon": "🌐",
                "active": True,
                "popular": True,
                "keywords": ["sitio web", "pagina web", "desarrollo web"],
            },
            {
                "id": "cat-design",
                "name": "Graphic Design",
                "slug": "graphic-design",
                "description": "Diseño e identidad visual",
                "icon": "🎨",
                "active": True,
                "popular": True,
                "keywords": ["diseño", "logo", "branding"],
            },
            {
                "id": "cat-legacy",
                "name": "Legacy Web",
                "slug": "legacy-web",
                "description": "Categoría retirada",
                "icon": "📁",
                "active": False,
                "popular": True,
                "keywords": ["sitio web", "web"],
            },
        ],
        "services": [
            {
                "id": "svc-landing",
                "title": "Landing page",
                "description": "Landing page optimizada",
                "price": 150,
                "category": "cat-web",
                "provider": "user-1",
                "active": True,
                "keywords": ["landing", "pagina de aterrizaje"],
                "tags": ["marketing"],
            },
            {
                "id": "svc-logo",
                "title": "Diseño de logo",
                "description": "Logo vectorial",
                "price": 80,
                "category": "cat-design",
                "provider": "user-2",
                "active": True,
                "keywords": [],
                "tags": ["isotipo"],
            },
            {
                "id": "svc-old",
                "title": "Sitio web retro",
                "description": "Ya no disponible",
                "price": 10,
                "category": "cat-web",
                "provider": "user-3",
                "active": False,
                "keywords": ["sitio web"],
                "tags": [],
            },
        ],
        "chatResponses": [
            {
                "id": "resp-help",
                "keywords": ["como funciona", "plataforma"],
                "text": "Conectamos clientes con proveedores.",
                "suggestions": ["Ver categorías", "¿Cómo pagar?"],
                "priority": 1,
                "active": True,
            },
            {
                "id": "resp-pricing",
                "keywords": ["precio", "tarifas"],
                "text": "Los precios dependen de cada servicio.",
                "categoryIds": ["cat-web", "cat-legacy"],
                "serviceIds": ["svc-landing", "svc-old"],
                "active": True,
            },
            {
                "id": "resp-disabled",
                "keywords": ["xyz123"],
                "text": "Nunca debería aparecer.",
                "active": False,
            },
        ],
    }


class ChatServiceTestCase(unittest.IsolatedAsyncioTestCase):
    """Covers every stage of process_message plus suggestions."""

    def _build_service(
        self,
        collections: dict[str, list[dict[str, Any]]] | None = None,
        config: ChatConfig | None = None,
    ) -> tuple[ChatService, RecordingDataSource]:
        data_source = RecordingDataSource(collections if collections is not None else build_collections())
        service = ChatService(data_source=data_source, config=config or ChatConfig(), chooser=first_choice)
        return service, data_source

    async def test_rejects_invalid_input(self) -> None:
        service, data_source = self._build_service()
        for message in ("", "   ", None, 42, ["hola"]):
            with self.assertRaises(InvalidInputError):
                await service.process_message(message)
        self.assertEqual(data_source.lookups, [])

    async def test_greeting_short_circuits(self) -> None:
        service, data_source = self._build_service()

        reply = await service.process_message("Hola")

        self.assertEqual(reply.type, "text")
        self.assertEqual(reply.message, GREETING_RESPONSES[0])
        self.assertEqual(reply.suggestions, list(DEFAULT_SUGGESTIONS[:4]))
        self.assertEqual(data_source.lookups, [])

    async def test_greeting_with_random_chooser_stays_in_pool(self) -> None:
        service = ChatService(data_source=MockDataSource(collections=build_collections()))
        reply = await service.process_message("Hola")
        self.assertIn(reply.message, GREETING_RESPONSES)
        self.assertTrue(reply.suggestions)

    async def test_farewell_has_no_suggestions(self) -> None:
        service, data_source = self._build_service()

        reply = await service.process_message("Muchas gracias, adiós")

        self.assertEqual(reply.type, "text")
        self.assertEqual(reply.message, "¡Hasta pronto! Espero haberte ayudado.")
        self.assertEqual(reply.suggestions, [])
        self.assertEqual(data_source.lookups, [])

    async def test_canned_response_text_reply(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("¿Cómo funciona la plataforma?")

        self.assertEqual(reply.type, "text")
        self.assertEqual(reply.message, "Conectamos clientes con proveedores.")
        self.assertEqual(reply.suggestions, ["Ver categorías", "¿Cómo pagar?"])

    async def test_canned_response_with_linked_records(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("Cuál es el precio")

        self.assertEqual(reply.type, "search_results")
        self.assertEqual(reply.message, "Los precios dependen de cada servicio.")
        self.assertEqual([category.id for category in reply.categories], ["cat-web"])
        self.assertEqual([item.id for item in reply.services], ["svc-landing"])
        self.assertEqual(reply.services[0].category.name, "Web Development")
        # No own suggestions: default suggestions apply.
        self.assertEqual(reply.suggestions, list(DEFAULT_SUGGESTIONS[:4]))

    async def test_higher_priority_canned_response_wins(self) -> None:
        collections = build_collections()
        collections["chatResponses"] = [
            {"id": "r1", "keywords": ["ayuda"], "text": "Ayuda general", "priority": 1},
            {"id": "r2", "keywords": ["ayuda"], "text": "Ayuda prioritaria", "priority": 3},
        ]
        service, _ = self._build_service(collections)

        reply = await service.process_message("necesito ayuda")

        self.assertEqual(reply.message, "Ayuda prioritaria")

    async def test_equal_canned_scores_keep_collection_order(self) -> None:
        collections = build_collections()
        collections["chatResponses"] = [
            {"id": "r1", "keywords": ["ayuda"], "text": "Primera"},
            {"id": "r2", "keywords": ["ayuda"], "text": "Segunda"},
        ]
        service, _ = self._build_service(collections)

        reply = await service.process_message("necesito ayuda")

        self.assertEqual(reply.message, "Primera")

    async def test_category_search_results(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("Necesito un sitio web para mi negocio")

        self.assertEqual(reply.type, "search_results")
        self.assertEqual(reply.message, "¡He encontrado algunas opciones que podrían interesarte!")
        self.assertEqual(
            [category.model_dump() for category in reply.categories],
            [
                {
                    "id": "cat-web",
                    "name": "Web Development",
                    "description": "Sitios y aplicaciones web",
                    "icon": "🌐",
                }
            ],
        )
        self.assertEqual(reply.services, [])
        self.assertIn("Más servicios de Web Development", reply.suggestions)
        self.assertEqual(
            reply.suggestions,
            ["Más servicios de Web Development", *DEFAULT_SUGGESTIONS[:2]],
        )

    async def test_service_matches_by_title_and_tag(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("Quiero un isotipo")

        self.assertEqual(reply.type, "search_results")
        self.assertEqual(reply.categories, [])
        self.assertEqual([item.id for item in reply.services], ["svc-logo"])
        self.assertEqual(reply.services[0].price, 80)
        self.assertEqual(reply.services[0].category.id, "cat-design")
        self.assertEqual(reply.suggestions, list(DEFAULT_SUGGESTIONS[:4]))

    async def test_tags_ignored_when_service_has_keywords(self) -> None:
        collections = build_collections()
        collections["categories"] = []
        collections["chatResponses"] = []
        service, _ = self._build_service(collections)

        # svc-landing is tagged "marketing" but its keywords do not match.
        reply = await service.process_message("quiero marketing")

        self.assertEqual(reply.type, "text")
        self.assertEqual(reply.message, DEFAULT_RESPONSES[0])

        reply = await service.process_message("quiero una landing")
        self.assertEqual([item.id for item in reply.services], ["svc-landing"])

    async def test_inactive_records_never_returned(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("Necesito un sitio web")

        self.assertNotIn("cat-legacy", [category.id for category in reply.categories])
        self.assertNotIn("svc-old", [item.id for item in reply.services])

    async def test_results_are_truncated(self) -> None:
        collections = build_collections()
        collections["categories"] = [
            {"id": f"cat-{index}", "name": f"Web {index}", "keywords": ["web"]} for index in range(6)
        ]
        collections["services"] = [
            {"id": f"svc-{index}", "title": f"Web {index}", "price": index, "keywords": ["web"]}
            for index in range(8)
        ]
        collections["chatResponses"] = []
        service, _ = self._build_service(collections)

        reply = await service.process_message("busco web")

        self.assertEqual([category.id for category in reply.categories], ["cat-0", "cat-1", "cat-2"])
        self.assertEqual(len(reply.services), 5)
        self.assertLessEqual(len(reply.suggestions), 4)

    async def test_custom_limits(self) -> None:
        collections = build_collections()
        collections["categories"] = [
            {"id": f"cat-{index}", "name": f"Web {index}", "keywords": ["web"]} for index in range(6)
        ]
        service, _ = self._build_service(collections, ChatConfig(max_categories=1, max_suggestions=2))

        reply = await service.process_message("busco web")

        self.assertEqual(len(reply.categories), 1)
        self.assertEqual(reply.suggestions, ["Más servicios de Web 0", DEFAULT_SUGGESTIONS[0]])

    async def test_default_fallback(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("xyz123 random gibberish")

        self.assertEqual(reply.type, "text")
        self.assertEqual(reply.message, DEFAULT_RESPONSES[0])
        self.assertEqual(reply.suggestions, list(DEFAULT_SUGGESTIONS[:4]))

    async def test_default_fallback_with_seeded_catalog(self) -> None:
        service = ChatService(data_source=MockDataSource())

        reply = await service.process_message("xyz123 random gibberish")

        self.assertEqual(reply.type, "text")
        self.assertIn(reply.message, DEFAULT_RESPONSES)

    async def test_reads_collections_on_every_message(self) -> None:
        service, data_source = self._build_service()

        await service.process_message("busco algo")
        await service.process_message("busco algo")

        self.assertEqual(data_source.lookups.count("categories"), 2)

    async def test_storage_failure_propagates(self) -> None:
        service = ChatService(data_source=FailingDataSource())

        with self.assertRaises(CollaboratorUnavailableError):
            await service.process_message("necesito un sitio web")

        # Greetings never touch storage.
        reply = await service.process_message("hola")
        self.assertEqual(reply.type, "text")

    async def test_malformed_record_is_reported(self) -> None:
        collections = build_collections()
        collections["services"] = [{"id": "svc-bad", "price": -5}]
        service, _ = self._build_service(collections)

        with self.assertRaises(InvalidRecordError) as context:
            await service.process_message("busco algo")
        self.assertEqual(context.exception.collection, "services")

    async def test_null_record_id_is_rejected(self) -> None:
        collections = build_collections()
        collections["categories"] = [{"id": None, "name": "Web Development", "keywords": ["web"]}]
        service, _ = self._build_service(collections)

        with self.assertRaises(InvalidRecordError) as context:
            await service.process_message("busco algo")
        self.assertEqual(context.exception.collection, "categories")

    def test_empty_response_pools_are_rejected(self) -> None:
        for field in ("greeting_responses", "farewell_responses", "default_responses"):
            with self.assertRaises(ValueError):
                ChatConfig(**{field: ()})

    async def test_reply_is_plain_data(self) -> None:
        service, _ = self._build_service()

        reply = await service.process_message("Necesito un sitio web")

        data = reply.model_dump()
        self.assertEqual(data["type"], "search_results")
        self.assertIsInstance(data["categories"][0], dict)

    async def test_config_built_from_settings(self) -> None:
        settings = Settings(chat_max_categories=1, chat_max_suggestions=3, chat_match_threshold=0.3)
        config = build_chat_config(settings)

        self.assertEqual(config.max_categories, 1)
        self.assertEqual(config.max_suggestions, 3)
        self.assertEqual(config.match_threshold, 0.3)
        self.assertEqual(config.max_services, 5)

        service, _ = self._build_service(config=config)
        reply = await service.process_message("Hola")
        self.assertEqual(len(reply.suggestions), 3)

    async def test_get_suggestions(self) -> None:
        service, _ = self._build_service()

        suggestions = await service.get_suggestions()

        self.assertEqual(
            suggestions,
            [
                "Busco servicios de Web Development",
                "Busco servicios de Graphic Design",
                DEFAULT_SUGGESTIONS[0],
                DEFAULT_SUGGESTIONS[1],
            ],
        )


if __name__ == "__main__":
    unittest.main()
