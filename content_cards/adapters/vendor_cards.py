"""Vendor-facing card interfaces and per-shape field extraction.

Mental model refresher:
- This is an adapter/edge module.
- The vendor SDK hands out cards of a few concrete shapes (banner, captioned
  image, classic); each shape carries a different subset of display fields.
- One `CardShape` per vendor shape pulls those fields out, so the card adapter
  only depends on "a card may provide image/title/description".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from ..types import RefreshObserver


class RawCard(Protocol):
    id_string: Any
    created: Any
    dismissible: Any
    url_string: Any
    extras: Mapping[str, Any] | None

    def log_content_card_clicked(self) -> None: ...

    def log_content_card_impression(self) -> None: ...

    def log_content_card_dismissed(self) -> None: ...


class ContentCardsClient(Protocol):
    """What the adapter needs from the vendor SDK's content card controller."""

    def current_cards(self) -> Sequence[RawCard] | None: ...

    def request_refresh(self) -> None: ...

    def add_refresh_observer(self, observer: RefreshObserver) -> None: ...


@dataclass(frozen=True)
class DisplayFields:
    image: Any = None
    title: Any = None
    card_description: Any = None


class CardShape(Protocol):
    def matches(self, card: Any) -> bool: ...

    def display_fields(self, card: Any) -> DisplayFields: ...


class _TypedCardShape:
    def __init__(self, card_type: type) -> None:
        self.card_type = card_type

    def matches(self, card: Any) -> bool:
        return isinstance(card, self.card_type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.card_type.__name__})"


class BannerCardShape(_TypedCardShape):
    """Banner cards only carry an image."""

    def display_fields(self, card: Any) -> DisplayFields:
        return DisplayFields(image=getattr(card, "image", None))


class CaptionedImageCardShape(_TypedCardShape):
    def display_fields(self, card: Any) -> DisplayFields:
        return DisplayFields(
            image=getattr(card, "image", None),
            title=getattr(card, "title", None),
            card_description=getattr(card, "card_description", None),
        )


class ClassicCardShape(_TypedCardShape):
    def display_fields(self, card: Any) -> DisplayFields:
        return DisplayFields(
            image=getattr(card, "image", None),
            title=getattr(card, "title", None),
            card_description=getattr(card, "card_description", None),
        )


def extract_display_fields(card: Any, shapes: Sequence[CardShape]) -> DisplayFields:
    """Use the first matching shape; unknown shapes contribute nothing."""
    for shape in shapes:
        if shape.matches(card):
            return shape.display_fields(card)
    return DisplayFields()
