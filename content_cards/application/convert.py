"""Application dispatch from class type to message variant.

Mental model refresher:
- Application layer coordinates which domain rule set applies.
- In this project it:
  1) picks the variant parser for a classified card
  2) returns None for class types that have no typed model yet
  3) falls back to the full page parser for anything unrecognized
"""

from __future__ import annotations

from ..domain.class_type import ContentCardClassType
from ..domain.messages import (
    ContentCardable,
    ContentCardEventLogger,
    parse_full_page_message,
    parse_web_view_message,
)
from ..types import Fields

UNMODELED_CLASS_TYPES = frozenset(
    {
        ContentCardClassType.AD,
        ContentCardClassType.COUPON,
        ContentCardClassType.ITEM_TILE,
        ContentCardClassType.ITEM_GROUP,
    }
)


def build_content_cardable(
    fields: Fields,
    class_type: ContentCardClassType,
    *,
    event_logger: ContentCardEventLogger | None = None,
) -> ContentCardable | None:
    """Instantiate the typed object for one card, or None if it cannot be built."""
    if class_type in UNMODELED_CLASS_TYPES:
        return None
    if class_type is ContentCardClassType.MESSAGE_WEB_VIEW:
        return parse_web_view_message(fields, class_type, event_logger=event_logger)
    return parse_full_page_message(fields, class_type, event_logger=event_logger)
