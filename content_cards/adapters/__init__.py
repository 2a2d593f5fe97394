"""Adapter layer: vendor card interfaces, conversion and transport glue."""

from .card_adapter import ContentCardAdapter
from .in_memory import (
    BannerCardRecord,
    CaptionedImageCardRecord,
    ClassicCardRecord,
    ContentCardRecord,
    InMemoryContentCardsClient,
    default_card_shapes,
)
from .kafka_runtime import publish_cards_refreshed_event, run_content_card_worker_forever
from .payload import CardsRefreshed, parse_cards_refreshed_payload, serialize_message
from .vendor_cards import (
    BannerCardShape,
    CaptionedImageCardShape,
    CardShape,
    ClassicCardShape,
    ContentCardsClient,
    DisplayFields,
    RawCard,
    extract_display_fields,
)

__all__ = [
    "BannerCardRecord",
    "BannerCardShape",
    "CaptionedImageCardRecord",
    "CaptionedImageCardShape",
    "CardShape",
    "CardsRefreshed",
    "ClassicCardRecord",
    "ClassicCardShape",
    "ContentCardAdapter",
    "ContentCardRecord",
    "ContentCardsClient",
    "DisplayFields",
    "InMemoryContentCardsClient",
    "RawCard",
    "default_card_shapes",
    "extract_display_fields",
    "parse_cards_refreshed_payload",
    "publish_cards_refreshed_event",
    "run_content_card_worker_forever",
    "serialize_message",
]
