"""Card adapter between the vendor SDK and typed content card objects.

Mental model refresher:
- This is the controller-like entrypoint for card conversion.
- The vendor client is injected; the adapter never reaches for a global SDK.
- Flow:
  vendor cards -> classify -> field bag -> application dispatch -> messages
- Interaction logging flows back: card id -> vendor card -> vendor log call.
- Logging is best-effort: misses are no-ops and vendor failures never escape.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

from ..application.convert import build_content_cardable
from ..domain.class_type import ContentCardClassType, classify
from ..domain.keys import ContentCardKey
from ..domain.messages import ContentCardable
from ..types import FieldBag, RefreshObserver
from .in_memory import default_card_shapes
from .vendor_cards import CardShape, ContentCardsClient, RawCard, extract_display_fields

logger = logging.getLogger(__name__)


class ContentCardAdapter:
    def __init__(
        self,
        client: ContentCardsClient,
        *,
        card_shapes: Sequence[CardShape] | None = None,
    ) -> None:
        self._client = client
        self._card_shapes: tuple[CardShape, ...] = (
            tuple(card_shapes) if card_shapes is not None else default_card_shapes()
        )
        # card id -> vendor card each converted message was built from
        self._source_cards: dict[str, RawCard] = {}

    @property
    def content_cards(self) -> list[RawCard]:
        cards = self._client.current_cards()
        return list(cards) if cards else []

    def add_observer_for_content_cards(self, observer: RefreshObserver) -> None:
        """Register `observer(is_successful)` for refresh completion."""
        self._client.add_refresh_observer(observer)

    def request_content_cards_refresh(self) -> None:
        self._client.request_refresh()

    def handle_content_cards_updated(
        self,
        is_successful: bool,
        class_types: Iterable[ContentCardClassType],
    ) -> list[ContentCardable]:
        """Convert the current snapshot after a refresh; a failed refresh yields []."""
        if not is_successful:
            return []
        return self.convert_content_cards(self.content_cards, class_types)

    def convert_content_cards(
        self,
        cards: Iterable[RawCard],
        class_types: Iterable[ContentCardClassType],
    ) -> list[ContentCardable]:
        """Convert vendor cards into typed objects, keeping input order.

        Cards whose class type is not wanted are skipped before parsing.
        Cards that fail to parse are dropped without affecting the rest of the
        batch. When an id repeats within the batch the first card that converts
        wins; a malformed or unwanted card never claims the id. Logging for a
        converted message resolves to the card it was built from.
        """
        wanted = frozenset(class_types)
        content_cardables: list[ContentCardable] = []
        seen_ids: set[str] = set()

        for card in cards:
            class_type = classify(_class_type_tag(card))
            if class_type not in wanted:
                continue

            fields = self._card_fields(card)
            card_id = fields.get(ContentCardKey.ID_STRING)
            if isinstance(card_id, str) and card_id in seen_ids:
                logger.debug("skipping duplicate content card id=%s", card_id)
                continue

            content_cardable = build_content_cardable(fields, class_type, event_logger=self)
            if content_cardable is None:
                logger.debug(
                    "dropped content card id=%r class_type=%s", card_id, class_type.value
                )
                continue
            if isinstance(card_id, str):
                seen_ids.add(card_id)
                self._source_cards[card_id] = card
            content_cardables.append(content_cardable)

        return content_cardables

    def get_content_card(self, id_string: str | None) -> RawCard | None:
        """Resolve a card id against the current snapshot.

        The card a message was converted from wins while it is still in the
        snapshot; otherwise the first card with that id.
        """
        if id_string is None:
            return None
        cards = self.content_cards
        source_card = self._source_cards.get(id_string)
        if source_card is not None and any(card is source_card for card in cards):
            return source_card
        for card in cards:
            if getattr(card, "id_string", None) == id_string:
                return card
        return None

    def log_content_card_clicked(self, id_string: str | None) -> None:
        card = self.get_content_card(id_string)
        if card is None:
            return
        self._forward_log(card.log_content_card_clicked, "clicked", id_string)

    def log_content_card_impression(self, id_string: str | None) -> None:
        card = self.get_content_card(id_string)
        if card is None:
            return
        self._forward_log(card.log_content_card_impression, "impression", id_string)

    def log_content_card_dismissed(self, id_string: str | None) -> None:
        card = self.get_content_card(id_string)
        if card is None:
            return
        self._forward_log(card.log_content_card_dismissed, "dismissed", id_string)

    def _forward_log(
        self, log_event: Callable[[], None], event_name: str, id_string: str | None
    ) -> None:
        try:
            log_event()
        except Exception as exc:
            logger.warning(
                "content card %s logging failed for id=%s: %s", event_name, id_string, exc
            )

    def _card_fields(self, card: RawCard) -> FieldBag:
        display = extract_display_fields(card, self._card_shapes)
        return {
            ContentCardKey.IMAGE: display.image,
            ContentCardKey.TITLE: display.title,
            ContentCardKey.CARD_DESCRIPTION: display.card_description,
            ContentCardKey.ID_STRING: getattr(card, "id_string", None),
            ContentCardKey.CREATED: getattr(card, "created", None),
            ContentCardKey.DISMISSABLE: getattr(card, "dismissible", None),
            ContentCardKey.URL_STRING: getattr(card, "url_string", None),
            ContentCardKey.EXTRAS: getattr(card, "extras", None),
        }


def _class_type_tag(card: Any) -> Any:
    extras = getattr(card, "extras", None)
    if not isinstance(extras, Mapping):
        return None
    return extras.get(ContentCardKey.CLASS_TYPE.value)
