"""Typed message variants built from content card field bags.

Mental model refresher:
- Domain modules hold the per-variant rules.
- They decide what a usable message is:
  - are the required card fields present and well typed?
  - which optional fields degrade to None?
  - which payload does a web view message carry?
- They never see vendor SDK objects, only the normalized field bag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol

from ..types import Extras, Fields
from .card_data import ContentCardData
from .class_type import ContentCardClassType
from .keys import ContentCardKey


class ContentCardEventLogger(Protocol):
    def log_content_card_clicked(self, id_string: str | None) -> None: ...

    def log_content_card_impression(self, id_string: str | None) -> None: ...

    def log_content_card_dismissed(self, id_string: str | None) -> None: ...


class ContentCardable:
    """Mixin for objects that may be backed by a vendor content card.

    Logging goes through `event_logger` using the embedded card id, so callers
    can write `message.log_content_card_clicked()` without touching the SDK.
    """

    content_card_data: ContentCardData | None
    event_logger: ContentCardEventLogger | None

    @property
    def is_content_card(self) -> bool:
        return self.content_card_data is not None

    @property
    def content_card_id(self) -> str | None:
        if self.content_card_data is None:
            return None
        return self.content_card_data.content_card_id

    def log_content_card_clicked(self) -> None:
        if self.event_logger is not None and self.content_card_id is not None:
            self.event_logger.log_content_card_clicked(self.content_card_id)

    def log_content_card_impression(self) -> None:
        if self.event_logger is not None and self.content_card_id is not None:
            self.event_logger.log_content_card_impression(self.content_card_id)

    def log_content_card_dismissed(self) -> None:
        if self.event_logger is not None and self.content_card_id is not None:
            self.event_logger.log_content_card_dismissed(self.content_card_id)


class Message(ContentCardable):
    """A Message Center entry; FullPageMessage and WebViewMessage implement it."""

    message_header: str | None
    message_title: str | None
    image_url: str | None
    card_description: str | None


class WebViewKind(Enum):
    HTML = "html"
    URL = "url"
    CONTENT_BLOCK = "content_block"
    NONE = "none"


@dataclass(frozen=True)
class WebViewType:
    kind: WebViewKind
    value: str | None = None

    @classmethod
    def html(cls, html_string: str) -> WebViewType:
        return cls(WebViewKind.HTML, html_string)

    @classmethod
    def url(cls, url_string: str) -> WebViewType:
        return cls(WebViewKind.URL, url_string)

    @classmethod
    def content_block(cls, content_block_id: str) -> WebViewType:
        return cls(WebViewKind.CONTENT_BLOCK, content_block_id)

    @classmethod
    def none(cls) -> WebViewType:
        return cls(WebViewKind.NONE)


@dataclass(frozen=True)
class WebViewMessage(Message):
    """`message_webview` card: opens a web view on an html string, url or content block."""

    content_card_data: ContentCardData | None
    web_view_type: WebViewType
    message_header: str | None = None
    message_title: str | None = None
    image_url: str | None = None
    card_description: str | None = None
    event_logger: ContentCardEventLogger | None = field(
        default=None, compare=False, repr=False
    )

    @property
    def web_view_string(self) -> str:
        return self.web_view_type.value or ""


@dataclass(frozen=True)
class FullPageMessage(Message):
    """`message_full_page` card: a scrollable page of content."""

    content_card_data: ContentCardData | None
    message_header: str | None = None
    message_title: str | None = None
    image_url: str | None = None
    card_title: str | None = None
    card_description: str | None = None
    feed_type: str | None = None
    has_feed_type: bool = False
    url_string: str | None = None
    event_logger: ContentCardEventLogger | None = field(
        default=None, compare=False, repr=False
    )


def parse_web_view_message(
    fields: Fields,
    class_type: ContentCardClassType,
    *,
    event_logger: ContentCardEventLogger | None = None,
) -> WebViewMessage | None:
    """Build a WebViewMessage, or return None when a required field is unusable.

    Payload priority: top-level url, then `extras.html`, then
    `extras.content_block_id`.
    """
    card_data = _content_card_data(fields, class_type)
    extras = _extras(fields)
    if card_data is None or extras is None:
        return None

    url_string = _as_str(fields.get(ContentCardKey.URL_STRING))
    html_string = _as_str(extras.get(ContentCardKey.HTML.value))
    content_block_id = _as_str(extras.get(ContentCardKey.CONTENT_BLOCK.value))

    if url_string is not None:
        web_view_type = WebViewType.url(url_string)
    elif html_string is not None:
        web_view_type = WebViewType.html(html_string)
    elif content_block_id is not None:
        web_view_type = WebViewType.content_block(content_block_id)
    else:
        web_view_type = WebViewType.none()

    return WebViewMessage(
        content_card_data=card_data,
        web_view_type=web_view_type,
        message_header=_as_str(extras.get(ContentCardKey.MESSAGE_HEADER.value)),
        message_title=_as_str(extras.get(ContentCardKey.MESSAGE_TITLE.value)),
        image_url=_as_str(fields.get(ContentCardKey.IMAGE)),
        card_description=_as_str(fields.get(ContentCardKey.CARD_DESCRIPTION)),
        event_logger=event_logger,
    )


def parse_full_page_message(
    fields: Fields,
    class_type: ContentCardClassType,
    *,
    event_logger: ContentCardEventLogger | None = None,
) -> FullPageMessage | None:
    """Build a FullPageMessage, or return None when a required field is unusable."""
    card_data = _content_card_data(fields, class_type)
    extras = _extras(fields)
    if card_data is None or extras is None:
        return None

    card_title = _as_str(fields.get(ContentCardKey.TITLE))
    message_title = _as_str(extras.get(ContentCardKey.MESSAGE_TITLE.value))
    if message_title is None:
        message_title = card_title

    # A present-but-mistyped feed_type still counts as present.
    has_feed_type = ContentCardKey.FEED_TYPE.value in extras
    feed_type = _as_str(extras.get(ContentCardKey.FEED_TYPE.value)) if has_feed_type else None

    return FullPageMessage(
        content_card_data=card_data,
        message_header=_as_str(extras.get(ContentCardKey.MESSAGE_HEADER.value)),
        message_title=message_title,
        image_url=_as_str(fields.get(ContentCardKey.IMAGE)),
        card_title=card_title,
        card_description=_as_str(fields.get(ContentCardKey.CARD_DESCRIPTION)),
        feed_type=feed_type,
        has_feed_type=has_feed_type,
        url_string=_as_str(fields.get(ContentCardKey.URL_STRING)),
        event_logger=event_logger,
    )


def _content_card_data(
    fields: Fields, class_type: ContentCardClassType
) -> ContentCardData | None:
    card_id = _as_str(fields.get(ContentCardKey.ID_STRING))
    created = fields.get(ContentCardKey.CREATED)
    dismissable = fields.get(ContentCardKey.DISMISSABLE)

    if not card_id:
        return None
    if isinstance(created, bool) or not isinstance(created, (int, float)):
        return None
    if not isinstance(dismissable, bool):
        return None

    return ContentCardData(
        content_card_id=card_id,
        content_card_class_type=class_type,
        created_at=float(created),
        is_dismissable=dismissable,
    )


def _extras(fields: Fields) -> Extras | None:
    extras = fields.get(ContentCardKey.EXTRAS)
    if not isinstance(extras, Mapping):
        return None
    return extras


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None
