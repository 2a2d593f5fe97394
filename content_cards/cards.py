"""Compatibility facade for content card conversion.

Module layout by abstraction layer:
- adapters: vendor card shapes, the card adapter and transport glue
- domain: key vocabulary, classification and message variants
- application: class type to variant dispatch
"""

from .adapters.card_adapter import ContentCardAdapter
from .adapters.in_memory import InMemoryContentCardsClient
from .adapters.kafka_runtime import publish_cards_refreshed_event, run_content_card_worker_forever
from .adapters.payload import parse_cards_refreshed_payload, serialize_message
from .application.convert import build_content_cardable
from .domain.card_data import ContentCardData
from .domain.class_type import ContentCardClassType, classify
from .domain.keys import ContentCardKey
from .domain.messages import (
    ContentCardable,
    FullPageMessage,
    Message,
    WebViewKind,
    WebViewMessage,
    WebViewType,
    parse_full_page_message,
    parse_web_view_message,
)

__all__ = [
    "ContentCardAdapter",
    "ContentCardClassType",
    "ContentCardData",
    "ContentCardKey",
    "ContentCardable",
    "FullPageMessage",
    "InMemoryContentCardsClient",
    "Message",
    "WebViewKind",
    "WebViewMessage",
    "WebViewType",
    "build_content_cardable",
    "classify",
    "parse_cards_refreshed_payload",
    "parse_full_page_message",
    "parse_web_view_message",
    "publish_cards_refreshed_event",
    "run_content_card_worker_forever",
    "serialize_message",
]
