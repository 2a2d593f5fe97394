#!/usr/bin/env python3
"""Convert a sample content card refresh locally without Kafka."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from content_cards.cards import (  # noqa: E402
    ContentCardAdapter,
    ContentCardable,
    InMemoryContentCardsClient,
    classify,
    parse_cards_refreshed_payload,
    serialize_message,
)


def main() -> int:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s %(message)s")

    payload = load_payload(args.payload_file)
    refreshed = parse_cards_refreshed_payload(payload)
    class_types = {classify(item.strip()) for item in args.class_types.split(",") if item.strip()}

    client = InMemoryContentCardsClient()
    adapter = ContentCardAdapter(client)
    converted: list[ContentCardable] = []

    def on_refresh(is_successful: bool) -> None:
        converted.extend(adapter.handle_content_cards_updated(is_successful, class_types))

    adapter.add_observer_for_content_cards(on_refresh)
    client.replace_cards(refreshed.cards, is_successful=refreshed.is_successful)

    print("[MESSAGES]")
    for message in converted:
        print(json.dumps(serialize_message(message), sort_keys=True))
        message.log_content_card_impression()
    if converted:
        converted[0].log_content_card_clicked()

    print("")
    print("[SUMMARY]")
    print(f"is_successful={refreshed.is_successful}")
    print(f"cards_received={len(refreshed.cards)} messages_converted={len(converted)}")
    for card in client.current_cards():
        print(f"card_id={card.id_string} logged_events={','.join(card.logged_events) or '-'}")
    return 0 if refreshed.is_successful else 1


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a content card refresh payload into typed messages."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file matching the content_cards.refreshed event shape.",
    )
    parser.add_argument(
        "--class-types",
        default="message_full_page,message_webview",
        help="Comma-separated class_type tags to convert.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dropped and duplicate cards.",
    )
    return parser.parse_args()


def load_payload(payload_file: Path | None) -> dict[str, Any]:
    if payload_file is None:
        return sample_payload()
    with payload_file.open("r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


def sample_payload() -> dict[str, Any]:
    return {
        "is_successful": True,
        "cards": [
            {
                "type": "captioned_image",
                "id": "card-full-page-1",
                "created": 1760000000.0,
                "dismissible": True,
                "url": "https://example.com/articles/1",
                "title": "Morning routine",
                "description": "Five habits worth keeping.",
                "image": "https://example.com/images/1.png",
                "extras": {
                    "class_type": "message_full_page",
                    "message_header": "New article",
                    "feed_type": "articles",
                },
            },
            {
                "type": "banner",
                "id": "card-ad-1",
                "created": 1760000100.0,
                "dismissible": False,
                "image": "https://example.com/images/ad.png",
                "extras": {"class_type": "ad_banner"},
            },
            {
                "type": "classic",
                "id": "card-webview-1",
                "created": 1760000200.0,
                "dismissible": True,
                "title": "Release notes",
                "description": "What changed this week.",
                "extras": {
                    "class_type": "message_webview",
                    "message_title": "Release notes",
                    "html": "<h1>Release notes</h1>",
                },
            },
        ],
    }


if __name__ == "__main__":
    sys.exit(main())
