"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates transport-shaped data (a "cards refreshed" event) into vendor
  card records, and typed messages back into plain dictionaries.
- It validates the envelope shape only; card field values are copied as-is
  because deciding what a malformed card is belongs to the domain parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..domain.messages import ContentCardable, FullPageMessage, WebViewMessage
from .in_memory import (
    BannerCardRecord,
    CaptionedImageCardRecord,
    ClassicCardRecord,
    ContentCardRecord,
)

CARD_TYPE_BANNER = "banner"
CARD_TYPE_CAPTIONED_IMAGE = "captioned_image"
CARD_TYPE_CLASSIC = "classic"


@dataclass(frozen=True)
class CardsRefreshed:
    is_successful: bool
    cards: tuple[ContentCardRecord, ...]


def parse_cards_refreshed_payload(payload: Mapping[str, Any]) -> CardsRefreshed:
    """Normalize a refresh event into a success flag and vendor card records."""
    is_successful = payload.get("is_successful")
    if not isinstance(is_successful, bool):
        raise ValueError("Missing required field: is_successful")

    raw_cards = payload.get("cards", [])
    if not isinstance(raw_cards, list):
        raise ValueError("cards must be a list")

    cards = []
    for index, raw_card in enumerate(raw_cards):
        if not isinstance(raw_card, Mapping):
            raise ValueError(f"cards[{index}] must be an object")
        cards.append(_card_record(raw_card))

    return CardsRefreshed(is_successful=is_successful, cards=tuple(cards))


def serialize_message(message: ContentCardable) -> dict[str, Any]:
    """Flatten a typed message into a JSON-compatible dictionary."""
    card_data = message.content_card_data
    payload: dict[str, Any] = {
        "card_id": card_data.content_card_id if card_data else None,
        "class_type": card_data.content_card_class_type.value if card_data else None,
        "created_at": card_data.created_at if card_data else None,
        "is_dismissable": card_data.is_dismissable if card_data else None,
    }

    if isinstance(message, WebViewMessage):
        payload.update(
            {
                "variant": "web_view",
                "message_header": message.message_header,
                "message_title": message.message_title,
                "image_url": message.image_url,
                "card_description": message.card_description,
                "web_view_kind": message.web_view_type.kind.value,
                "web_view_string": message.web_view_string,
            }
        )
    elif isinstance(message, FullPageMessage):
        payload.update(
            {
                "variant": "full_page",
                "message_header": message.message_header,
                "message_title": message.message_title,
                "image_url": message.image_url,
                "card_title": message.card_title,
                "card_description": message.card_description,
                "url_string": message.url_string,
            }
        )
        if message.has_feed_type:
            payload["feed_type"] = message.feed_type
    else:
        raise ValueError(f"Unsupported message type: {type(message).__name__}")

    return payload


def _card_record(raw_card: Mapping[str, Any]) -> ContentCardRecord:
    common: dict[str, Any] = {
        "id_string": raw_card.get("id"),
        "created": raw_card.get("created"),
        "dismissible": raw_card.get("dismissible"),
        "url_string": raw_card.get("url"),
        "extras": raw_card.get("extras"),
    }
    card_type = raw_card.get("type")

    if card_type == CARD_TYPE_BANNER:
        return BannerCardRecord(**common, image=raw_card.get("image"))
    if card_type == CARD_TYPE_CAPTIONED_IMAGE:
        return CaptionedImageCardRecord(
            **common,
            title=raw_card.get("title"),
            card_description=raw_card.get("description"),
            image=raw_card.get("image"),
        )
    if card_type == CARD_TYPE_CLASSIC:
        return ClassicCardRecord(
            **common,
            title=raw_card.get("title"),
            card_description=raw_card.get("description"),
            image=raw_card.get("image"),
        )
    return ContentCardRecord(**common)
