from __future__ import annotations

import unittest
from typing import Any

from content_cards.cards import (
    ContentCardClassType,
    ContentCardData,
    ContentCardKey,
    FullPageMessage,
    WebViewKind,
    WebViewMessage,
    WebViewType,
    parse_full_page_message,
    parse_web_view_message,
)

REQUIRED_KEYS = (
    ContentCardKey.ID_STRING,
    ContentCardKey.CREATED,
    ContentCardKey.DISMISSABLE,
    ContentCardKey.EXTRAS,
)


def make_fields(extras: dict[str, Any] | None = None) -> dict[ContentCardKey, Any]:
    return {
        ContentCardKey.ID_STRING: "card-1",
        ContentCardKey.CREATED: 1760000000.0,
        ContentCardKey.DISMISSABLE: True,
        ContentCardKey.EXTRAS: {} if extras is None else extras,
        ContentCardKey.TITLE: "Card title",
        ContentCardKey.CARD_DESCRIPTION: "Card description",
        ContentCardKey.IMAGE: "https://example.com/image.png",
    }


class RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    def log_content_card_clicked(self, id_string: str | None) -> None:
        self.calls.append(("clicked", id_string))

    def log_content_card_impression(self, id_string: str | None) -> None:
        self.calls.append(("impression", id_string))

    def log_content_card_dismissed(self, id_string: str | None) -> None:
        self.calls.append(("dismissed", id_string))


class RequiredFieldTests(unittest.TestCase):
    def test_missing_required_field_returns_none_for_both_parsers(self) -> None:
        parsers = {
            "full_page": (parse_full_page_message, ContentCardClassType.MESSAGE_FULL_PAGE),
            "web_view": (parse_web_view_message, ContentCardClassType.MESSAGE_WEB_VIEW),
        }
        for name, (parser, class_type) in parsers.items():
            for key in REQUIRED_KEYS:
                with self.subTest(parser=name, missing=key.value):
                    fields = make_fields()
                    del fields[key]
                    self.assertIsNone(parser(fields, class_type))

    def test_mistyped_required_field_returns_none(self) -> None:
        bad_values = [
            (ContentCardKey.ID_STRING, 123),
            (ContentCardKey.ID_STRING, ""),
            (ContentCardKey.CREATED, "1760000000"),
            (ContentCardKey.CREATED, True),
            (ContentCardKey.DISMISSABLE, "yes"),
            (ContentCardKey.DISMISSABLE, 1),
            (ContentCardKey.EXTRAS, ["class_type", "message_full_page"]),
            (ContentCardKey.EXTRAS, None),
        ]
        for key, value in bad_values:
            with self.subTest(key=key.value, value=value):
                fields = make_fields()
                fields[key] = value
                self.assertIsNone(
                    parse_full_page_message(fields, ContentCardClassType.MESSAGE_FULL_PAGE)
                )
                self.assertIsNone(
                    parse_web_view_message(fields, ContentCardClassType.MESSAGE_WEB_VIEW)
                )

    def test_integer_created_is_accepted_as_timestamp(self) -> None:
        fields = make_fields()
        fields[ContentCardKey.CREATED] = 1760000000

        message = parse_full_page_message(fields, ContentCardClassType.MESSAGE_FULL_PAGE)

        assert message is not None
        assert message.content_card_data is not None
        self.assertEqual(message.content_card_data.created_at, 1760000000.0)
        self.assertIsInstance(message.content_card_data.created_at, float)


class WebViewMessageTests(unittest.TestCase):
    def parse(self, fields: dict[ContentCardKey, Any]) -> WebViewMessage:
        message = parse_web_view_message(fields, ContentCardClassType.MESSAGE_WEB_VIEW)
        assert message is not None
        return message

    def test_url_wins_over_html(self) -> None:
        fields = make_fields({"html": "<p>hello</p>"})
        fields[ContentCardKey.URL_STRING] = "https://example.com/page"

        message = self.parse(fields)

        self.assertEqual(message.web_view_type, WebViewType.url("https://example.com/page"))
        self.assertEqual(message.web_view_string, "https://example.com/page")

    def test_html_wins_over_content_block(self) -> None:
        message = self.parse(make_fields({"html": "<p>hi</p>", "content_block_id": "cb-1"}))
        self.assertIs(message.web_view_type.kind, WebViewKind.HTML)
        self.assertEqual(message.web_view_string, "<p>hi</p>")

    def test_content_block_only(self) -> None:
        message = self.parse(make_fields({"content_block_id": "cb-1"}))
        self.assertEqual(message.web_view_type, WebViewType.content_block("cb-1"))

    def test_no_payload_is_none_kind(self) -> None:
        message = self.parse(make_fields())
        self.assertIs(message.web_view_type.kind, WebViewKind.NONE)
        self.assertEqual(message.web_view_string, "")

    def test_non_string_url_falls_through_to_html(self) -> None:
        fields = make_fields({"html": "<p>hi</p>"})
        fields[ContentCardKey.URL_STRING] = 42
        self.assertIs(self.parse(fields).web_view_type.kind, WebViewKind.HTML)

    def test_reads_header_and_title_from_extras(self) -> None:
        message = self.parse(make_fields({"message_header": "Header", "message_title": "Title"}))

        self.assertEqual(message.message_header, "Header")
        self.assertEqual(message.message_title, "Title")
        self.assertEqual(message.image_url, "https://example.com/image.png")
        self.assertEqual(message.card_description, "Card description")
        assert message.content_card_data is not None
        self.assertIs(
            message.content_card_data.content_card_class_type,
            ContentCardClassType.MESSAGE_WEB_VIEW,
        )

    def test_optional_fields_of_wrong_type_become_none(self) -> None:
        fields = make_fields({"message_header": 7})
        fields[ContentCardKey.IMAGE] = {"url": "nested"}
        message = self.parse(fields)
        self.assertIsNone(message.message_header)
        self.assertIsNone(message.image_url)


class FullPageMessageTests(unittest.TestCase):
    def parse(self, fields: dict[ContentCardKey, Any]) -> FullPageMessage:
        message = parse_full_page_message(fields, ContentCardClassType.MESSAGE_FULL_PAGE)
        assert message is not None
        return message

    def test_reads_display_fields(self) -> None:
        fields = make_fields({"message_header": "Header"})
        fields[ContentCardKey.URL_STRING] = "https://example.com/article"

        message = self.parse(fields)

        self.assertEqual(message.card_title, "Card title")
        self.assertEqual(message.card_description, "Card description")
        self.assertEqual(message.image_url, "https://example.com/image.png")
        self.assertEqual(message.message_header, "Header")
        self.assertEqual(message.url_string, "https://example.com/article")

    def test_message_title_falls_back_to_card_title(self) -> None:
        self.assertEqual(self.parse(make_fields()).message_title, "Card title")

    def test_message_title_from_extras_wins(self) -> None:
        message = self.parse(make_fields({"message_title": "Extras title"}))
        self.assertEqual(message.message_title, "Extras title")

    def test_absent_feed_type(self) -> None:
        message = self.parse(make_fields())
        self.assertFalse(message.has_feed_type)
        self.assertIsNone(message.feed_type)

    def test_present_non_string_feed_type_is_none_but_present(self) -> None:
        for value in (None, 3, {"kind": "articles"}):
            with self.subTest(value=value):
                message = self.parse(make_fields({"feed_type": value}))
                self.assertTrue(message.has_feed_type)
                self.assertIsNone(message.feed_type)

    def test_present_string_feed_type(self) -> None:
        message = self.parse(make_fields({"feed_type": "articles"}))
        self.assertTrue(message.has_feed_type)
        self.assertEqual(message.feed_type, "articles")


class ContentCardDataTests(unittest.TestCase):
    def test_equality_uses_card_id_only(self) -> None:
        first = ContentCardData("card-1", ContentCardClassType.MESSAGE_FULL_PAGE, 1.0, True)
        second = ContentCardData("card-1", ContentCardClassType.MESSAGE_WEB_VIEW, 2.0, False)

        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second}), 1)

    def test_different_ids_are_different_cards(self) -> None:
        first = ContentCardData("card-1", ContentCardClassType.AD, 1.0, True)
        second = ContentCardData("card-2", ContentCardClassType.AD, 1.0, True)
        self.assertNotEqual(first, second)
        self.assertNotEqual(first, "card-1")


class ContentCardableLoggingTests(unittest.TestCase):
    def test_logging_delegates_with_embedded_id(self) -> None:
        event_logger = RecordingLogger()
        message = parse_full_page_message(
            make_fields(), ContentCardClassType.MESSAGE_FULL_PAGE, event_logger=event_logger
        )
        assert message is not None

        message.log_content_card_impression()
        message.log_content_card_clicked()
        message.log_content_card_dismissed()

        self.assertTrue(message.is_content_card)
        self.assertEqual(
            event_logger.calls,
            [("impression", "card-1"), ("clicked", "card-1"), ("dismissed", "card-1")],
        )

    def test_manual_message_without_card_data_does_not_log(self) -> None:
        event_logger = RecordingLogger()
        message = FullPageMessage(
            content_card_data=None,
            message_title="Local only",
            event_logger=event_logger,
        )

        message.log_content_card_clicked()

        self.assertFalse(message.is_content_card)
        self.assertEqual(event_logger.calls, [])

    def test_message_without_logger_is_a_no_op(self) -> None:
        message = parse_web_view_message(make_fields(), ContentCardClassType.MESSAGE_WEB_VIEW)
        assert message is not None
        message.log_content_card_clicked()
        self.assertIsNone(message.event_logger)

    def test_event_logger_does_not_affect_equality(self) -> None:
        fields = make_fields()
        with_logger = parse_full_page_message(
            fields, ContentCardClassType.MESSAGE_FULL_PAGE, event_logger=RecordingLogger()
        )
        without_logger = parse_full_page_message(fields, ContentCardClassType.MESSAGE_FULL_PAGE)
        self.assertEqual(with_logger, without_logger)


if __name__ == "__main__":
    unittest.main()
