"""Card identity shared by every message variant."""

from __future__ import annotations

from dataclasses import dataclass

from .class_type import ContentCardClassType


@dataclass(frozen=True, eq=False)
class ContentCardData:
    """Vendor card metadata without any vendor SDK types.

    Two instances are the same card when their ids match, whatever the other
    fields say.
    """

    content_card_id: str
    content_card_class_type: ContentCardClassType
    created_at: float
    is_dismissable: bool

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentCardData):
            return NotImplemented
        return self.content_card_id == other.content_card_id

    def __hash__(self) -> int:
        return hash(self.content_card_id)
