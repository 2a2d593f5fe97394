"""Content card adapter: vendor content cards to typed, SDK-independent messages."""

from .cards import (
    ContentCardAdapter,
    ContentCardClassType,
    ContentCardData,
    ContentCardKey,
    ContentCardable,
    FullPageMessage,
    InMemoryContentCardsClient,
    Message,
    WebViewKind,
    WebViewMessage,
    WebViewType,
    build_content_cardable,
    classify,
    parse_cards_refreshed_payload,
    parse_full_page_message,
    parse_web_view_message,
    publish_cards_refreshed_event,
    run_content_card_worker_forever,
    serialize_message,
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
