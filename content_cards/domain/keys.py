"""Key vocabulary for content card field bags and extras."""

from __future__ import annotations

from enum import Enum


class ContentCardKey(str, Enum):
    """Recognized field names.

    Top-level keys index the normalized field bag built from a vendor card;
    the snake_case ones index the card's `extras` as configured in the vendor
    dashboard, so `.value` is what gets looked up there.
    """

    ID_STRING = "idString"
    CREATED = "created"
    CLASS_TYPE = "class_type"
    DISMISSABLE = "dismissable"
    EXTRAS = "extras"
    IMAGE = "image"
    TITLE = "title"
    CARD_DESCRIPTION = "cardDescription"
    MESSAGE_HEADER = "message_header"
    MESSAGE_TITLE = "message_title"
    HTML = "html"
    DISCOUNT_PERCENTAGE = "discount_percentage"
    TAGS = "tile_tags"
    CONTENT_BLOCK = "content_block_id"
    DETAIL = "tile_detail"
    GROUP_STYLE = "group_style"
    URL_STRING = "urlString"
    FEED_TYPE = "feed_type"
