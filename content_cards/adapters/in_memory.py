"""In-memory vendor card controller for local runs and tests.

Mental model refresher:
- This stands in for the vendor SDK's content card controller.
- In production, the SDK owns the card list and fires a "cards refreshed"
  notification; here the list is swapped explicitly with `replace_cards`.
- Cards record logged interactions so callers can assert on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from ..types import RefreshObserver
from .vendor_cards import (
    BannerCardShape,
    CaptionedImageCardShape,
    CardShape,
    ClassicCardShape,
)


@dataclass
class ContentCardRecord:
    """A vendor card with no shape-specific display fields."""

    id_string: Any = None
    created: Any = None
    dismissible: Any = None
    url_string: Any = None
    extras: Any = None
    logged_events: list[str] = field(default_factory=list, compare=False, repr=False)

    def log_content_card_clicked(self) -> None:
        self.logged_events.append("clicked")

    def log_content_card_impression(self) -> None:
        self.logged_events.append("impression")

    def log_content_card_dismissed(self) -> None:
        self.logged_events.append("dismissed")


@dataclass
class BannerCardRecord(ContentCardRecord):
    image: Any = None


@dataclass
class CaptionedImageCardRecord(ContentCardRecord):
    title: Any = None
    card_description: Any = None
    image: Any = None


@dataclass
class ClassicCardRecord(ContentCardRecord):
    title: Any = None
    card_description: Any = None
    image: Any = None


def default_card_shapes() -> tuple[CardShape, ...]:
    return (
        BannerCardShape(BannerCardRecord),
        CaptionedImageCardShape(CaptionedImageCardRecord),
        ClassicCardShape(ClassicCardRecord),
    )


class InMemoryContentCardsClient:
    def __init__(self, cards: Iterable[Any] | None = None) -> None:
        self._cards: list[Any] = list(cards or [])
        self._observers: list[RefreshObserver] = []
        self.refresh_requests = 0

    def current_cards(self) -> list[Any]:
        return list(self._cards)

    def add_refresh_observer(self, observer: RefreshObserver) -> None:
        self._observers.append(observer)

    def request_refresh(self) -> None:
        self.refresh_requests += 1
        self._notify(True)

    def replace_cards(self, cards: Iterable[Any], *, is_successful: bool = True) -> None:
        """Swap the card snapshot and notify observers.

        A failed refresh keeps the previous snapshot.
        """
        if is_successful:
            self._cards = list(cards)
        self._notify(is_successful)

    def _notify(self, is_successful: bool) -> None:
        for observer in list(self._observers):
            observer(is_successful)
