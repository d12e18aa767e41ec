"""Static chat configuration: match weights, phrase pools and result limits."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.core.settings import Settings


@dataclass(frozen=True, slots=True)
class MatchWeights:
    """Weight contributed by each keyword match class."""

    exact: float = 1.0
    partial: float = 0.7
    related: float = 0.4


STOP_WORDS: frozenset[str] = frozenset(
    {
        "el", "la", "los", "las", "un", "una", "unos", "unas", "de", "del", "a", "ante",
        "con", "en", "para", "por", "sin", "sobre", "tras", "y", "o", "pero", "que", "si",
    }
)

GREETING_PHRASES: tuple[str, ...] = (
    "hola",
    "hello",
    "hi",
    "buenos días",
    "buenas tardes",
    "buenas noches",
    "qué tal",
    "saludos",
    "hey",
)

FAREWELL_PHRASES: tuple[str, ...] = (
    "adiós",
    "bye",
    "chao",
    "hasta luego",
    "nos vemos",
    "gracias",
)

GREETING_RESPONSES: tuple[str, ...] = (
    "¡Hola! Soy el asistente virtual del Marketplace de Servicios. ¿En qué puedo ayudarte hoy?",
    "¡Bienvenido! ¿Qué tipo de servicio estás buscando?",
    "Hola, estoy aquí para ayudarte a encontrar el servicio perfecto. ¿Qué necesitas?",
    "¡Saludos! Cuéntame, ¿qué tipo de servicio estás buscando?",
)

FAREWELL_RESPONSES: tuple[str, ...] = (
    "¡Hasta pronto! Espero haberte ayudado.",
    "Ha sido un placer asistirte. ¡Vuelve cuando quieras!",
    "¡Adiós! Si necesitas algo más, estaré aquí.",
    "Gracias por usar nuestro servicio. ¡Que tengas un buen día!",
)

DEFAULT_RESPONSES: tuple[str, ...] = (
    "No he encontrado información específica sobre eso. ¿Podrías darme más detalles?",
    "No tengo una respuesta para eso. ¿Te gustaría ver las categorías disponibles?",
    "No estoy seguro de entender tu consulta. ¿Qué tipo de servicio estás buscando?",
    "Parece que no tenemos esa categoría específica. ¿Puedo mostrarte alternativas similares?",
)

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "Ver todas las categorías",
    "Servicios más populares",
    "¿Cómo funciona la plataforma?",
    "Necesito un desarrollo web",
    "Busco diseño gráfico",
)

SEARCH_RESULTS_MESSAGE = "¡He encontrado algunas opciones que podrían interesarte!"


@dataclass(frozen=True, slots=True)
class ChatConfig:
    """Immutable configuration shared by the matcher, classifier, ranker and chat service."""

    match_threshold: float = 0.6
    max_categories: int = 3
    max_services: int = 5
    max_suggestions: int = 4
    canned_response_min_score: float = 0.5
    weights: MatchWeights = field(default_factory=MatchWeights)
    stop_words: frozenset[str] = STOP_WORDS
    greeting_phrases: tuple[str, ...] = GREETING_PHRASES
    farewell_phrases: tuple[str, ...] = FAREWELL_PHRASES
    greeting_responses: tuple[str, ...] = GREETING_RESPONSES
    farewell_responses: tuple[str, ...] = FAREWELL_RESPONSES
    default_responses: tuple[str, ...] = DEFAULT_RESPONSES
    default_suggestions: tuple[str, ...] = DEFAULT_SUGGESTIONS
    search_results_message: str = SEARCH_RESULTS_MESSAGE
    category_suggestion_template: str = "Más servicios de {name}"
    popular_suggestion_template: str = "Busco servicios de {name}"

    def __post_init__(self) -> None:
        for name in ("greeting_responses", "farewell_responses", "default_responses"):
            if not getattr(self, name):
                raise ValueError(f"ChatConfig.{name} must contain at least one response")


DEFAULT_CHAT_CONFIG = ChatConfig()


def build_chat_config(settings: Settings) -> ChatConfig:
    """Apply environment overrides from settings on top of the default chat configuration."""
    return replace(
        DEFAULT_CHAT_CONFIG,
        match_threshold=settings.chat_match_threshold,
        max_categories=settings.chat_max_categories,
        max_services=settings.chat_max_services,
        max_suggestions=settings.chat_max_suggestions,
    )
