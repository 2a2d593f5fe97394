"""Domain layer: key vocabulary, classification and message variants."""

from .card_data import ContentCardData
from .class_type import ContentCardClassType, classify
from .keys import ContentCardKey
from .messages import (
    ContentCardable,
    ContentCardEventLogger,
    FullPageMessage,
    Message,
    WebViewKind,
    WebViewMessage,
    WebViewType,
    parse_full_page_message,
    parse_web_view_message,
)

__all__ = [
    "ContentCardClassType",
    "ContentCardData",
    "ContentCardEventLogger",
    "ContentCardKey",
    "ContentCardable",
    "FullPageMessage",
    "Message",
    "WebViewKind",
    "WebViewMessage",
    "WebViewType",
    "classify",
    "parse_full_page_message",
    "parse_web_view_message",
]
