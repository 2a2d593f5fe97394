"""Class type classification for content cards.

The `class_type` value lives in each card's extras and must match one of the
tags configured in the vendor dashboard; anything else is UNKNOWN.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ContentCardClassType(Enum):
    AD = "ad"
    COUPON = "coupon"
    ITEM_TILE = "item_tile"
    ITEM_GROUP = "item_group"
    MESSAGE_FULL_PAGE = "message_full_page"
    MESSAGE_WEB_VIEW = "message_web_view"
    UNKNOWN = "unknown"

    @property
    def is_item(self) -> bool:
        return self in (ContentCardClassType.ITEM_TILE, ContentCardClassType.ITEM_GROUP)

    @property
    def is_message(self) -> bool:
        return self in (
            ContentCardClassType.MESSAGE_FULL_PAGE,
            ContentCardClassType.MESSAGE_WEB_VIEW,
        )

    @classmethod
    def from_raw(cls, raw_type: Any) -> ContentCardClassType:
        return classify(raw_type)


_RAW_CLASS_TYPES: dict[str, ContentCardClassType] = {
    "coupon_code": ContentCardClassType.COUPON,
    "home_tile": ContentCardClassType.ITEM_TILE,
    "group": ContentCardClassType.ITEM_GROUP,
    "message_full_page": ContentCardClassType.MESSAGE_FULL_PAGE,
    "message_webview": ContentCardClassType.MESSAGE_WEB_VIEW,
    "ad_banner": ContentCardClassType.AD,
}


def classify(raw_type: Any) -> ContentCardClassType:
    """Map a raw `class_type` tag to its class type (case-insensitive)."""
    if not isinstance(raw_type, str):
        return ContentCardClassType.UNKNOWN
    return _RAW_CLASS_TYPES.get(raw_type.lower(), ContentCardClassType.UNKNOWN)
