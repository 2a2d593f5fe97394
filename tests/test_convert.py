from __future__ import annotations

import unittest
from typing import Any

from content_cards.cards import (
    ContentCardClassType,
    ContentCardKey,
    FullPageMessage,
    WebViewMessage,
    build_content_cardable,
)


def make_fields() -> dict[ContentCardKey, Any]:
    return {
        ContentCardKey.ID_STRING: "card-1",
        ContentCardKey.CREATED: 1760000000.0,
        ContentCardKey.DISMISSABLE: False,
        ContentCardKey.EXTRAS: {"class_type": "whatever"},
        ContentCardKey.TITLE: "Title",
    }


class BuildContentCardableTests(unittest.TestCase):
    def test_unmodeled_class_types_return_none(self) -> None:
        for class_type in (
            ContentCardClassType.AD,
            ContentCardClassType.COUPON,
            ContentCardClassType.ITEM_TILE,
            ContentCardClassType.ITEM_GROUP,
        ):
            with self.subTest(class_type=class_type):
                self.assertIsNone(build_content_cardable(make_fields(), class_type))

    def test_full_page_dispatch(self) -> None:
        result = build_content_cardable(make_fields(), ContentCardClassType.MESSAGE_FULL_PAGE)
        self.assertIsInstance(result, FullPageMessage)

    def test_web_view_dispatch(self) -> None:
        result = build_content_cardable(make_fields(), ContentCardClassType.MESSAGE_WEB_VIEW)
        self.assertIsInstance(result, WebViewMessage)

    def test_unknown_falls_back_to_full_page(self) -> None:
        result = build_content_cardable(make_fields(), ContentCardClassType.UNKNOWN)

        self.assertIsInstance(result, FullPageMessage)
        assert result is not None and result.content_card_data is not None
        self.assertIs(
            result.content_card_data.content_card_class_type, ContentCardClassType.UNKNOWN
        )

    def test_parse_failure_propagates_as_none(self) -> None:
        fields = make_fields()
        del fields[ContentCardKey.EXTRAS]
        self.assertIsNone(build_content_cardable(fields, ContentCardClassType.MESSAGE_WEB_VIEW))


if __name__ == "__main__":
    unittest.main()
