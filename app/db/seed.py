"""Default marketplace catalog used to seed empty stores."""

from __future__ import annotations

import secrets
from typing import Any

from app.interfaces.data_source import CATEGORIES, CHAT_RESPONSES, SERVICES

CATEGORY_SLUGS: tuple[str, ...] = (
    "web-development",
    "mobile-app-development",
    "graphic-design",
    "logo-design",
    "content-writing",
    "copywriting",
    "translation",
    "data-entry",
    "virtual-assistant",
    "accounting",
    "legal",
    "seo",
    "social-media-marketing",
    "video-editing",
    "education-tutoring",
)

POPULAR_CATEGORIES: frozenset[str] = frozenset(
    {"web-development", "mobile-app-development", "graphic-design", "content-writing"}
)

CATEGORY_ICONS: dict[str, str] = {
    "web-development": "🌐",
    "mobile-app-development": "📱",
    "graphic-design": "🎨",
    "logo-design": "⭐",
    "content-writing": "✍️",
    "copywriting": "📣",
    "translation": "🌍",
    "data-entry": "📊",
    "virtual-assistant": "👩‍💼",
    "accounting": "💰",
    "legal": "⚖️",
    "seo": "🔍",
    "social-media-marketing": "📱",
    "education-tutoring": "📚",
}
DEFAULT_ICON = "📁"

SPECIFIC_KEYWORDS: dict[str, tuple[str, ...]] = {
    "web-development": ("página web", "sitio web", "desarrollo web", "crear web", "programación web"),
    "mobile-app-development": ("app", "aplicación móvil", "desarrollo app", "programar app"),
    "graphic-design": ("diseño", "logo", "identidad visual", "branding"),
    "content-writing": ("redacción", "contenido", "blog", "artículos", "escribir"),
}


def generate_id() -> str:
    """Return a 24-character hex identifier."""
    return secrets.token_hex(12)


def category_name(slug: str) -> str:
    return " ".join(word.capitalize() for word in slug.split("-"))


def category_icon(slug: str) -> str:
    return CATEGORY_ICONS.get(slug, DEFAULT_ICON)


def category_keywords(slug: str) -> list[str]:
    """Build the keyword set of a category from its slug."""
    name = slug.replace("-", " ")
    keywords = [
        name,
        *name.split(),
        f"servicio de {name}",
        f"{name} profesional",
        f"contratar {name}",
    ]
    keywords.extend(SPECIFIC_KEYWORDS.get(slug, ()))
    return keywords


def default_categories() -> list[dict[str, Any]]:
    return [
        {
            "id": generate_id(),
            "name": category_name(slug),
            "slug": slug,
            "description": f"Servicios relacionados con {slug.replace('-', ' ')}",
            "icon": category_icon(slug),
            "order": index,
            "active": True,
            "popular": slug in POPULAR_CATEGORIES,
            "keywords": category_keywords(slug),
        }
        for index, slug in enumerate(CATEGORY_SLUGS)
    ]


def default_chat_responses() -> list[dict[str, Any]]:
    return [
        {
            "id": generate_id(),
            "keywords": ["hola", "buenos dias", "buenas tardes", "saludos", "hey"],
            "text": "¡Hola! Soy el asistente virtual de Marketplace de Servicios. ¿En qué puedo ayudarte hoy?",
            "suggestions": ["Ver categorías populares", "Buscar servicios", "¿Cómo funciona?"],
            "priority": 1,
            "active": True,
        },
        {
            "id": generate_id(),
            "keywords": ["como funciona", "explicar", "plataforma", "ayuda", "info"],
            "text": (
                "Marketplace de Servicios conecta a clientes con proveedores de servicios. "
                "Puedes explorar categorías, buscar servicios específicos y contratar profesionales. "
                "Para ver detalles completos y contactar a un proveedor, debes desbloquear el servicio."
            ),
            "suggestions": ["Ver categorías", "Servicios populares", "¿Cómo pagar?"],
            "priority": 1,
            "active": True,
        },
    ]


def default_collections() -> dict[str, list[dict[str, Any]]]:
    """Return a fresh default catalog keyed by collection name."""
    return {
        CATEGORIES: default_categories(),
        SERVICES: [],
        CHAT_RESPONSES: default_chat_responses(),
    }
