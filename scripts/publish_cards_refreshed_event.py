#!/usr/bin/env python3
"""Publish one `content_cards.refreshed` event to Kafka for local testing."""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
import uuid
from pathlib import Path
from typing import Any

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from content_cards.adapters.kafka_runtime import publish_cards_refreshed_event  # noqa: E402


def main() -> int:
    _load_env_file(REPO_ROOT / ".env")
    args = parse_args()
    payload = build_payload(args)
    metadata = publish_cards_refreshed_event(payload, topic=args.topic)

    print("[PUBLISHED]")
    print(f"topic={metadata['topic']}")
    print(f"partition={metadata['partition']}")
    print(f"offset={metadata['offset']}")
    print(f"is_successful={payload['is_successful']} cards={len(payload['cards'])}")
    return 0


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Publish one content_cards.refreshed event for Kafka testing."
    )
    parser.add_argument(
        "--payload-file",
        type=Path,
        default=None,
        help="Optional JSON file with the full event. Default: one generated card.",
    )
    parser.add_argument(
        "--class-type",
        default="message_full_page",
        help="class_type tag of the generated card.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Optional card url (web view cards prefer it over extras.html).",
    )
    parser.add_argument(
        "--failed",
        action="store_true",
        help="Publish a failed refresh (is_successful=false).",
    )
    parser.add_argument(
        "--topic",
        default=None,
        help="Override Kafka topic (defaults to KAFKA_TOPIC_CONTENT_CARDS_REFRESHED).",
    )
    return parser.parse_args()


def build_payload(args: argparse.Namespace) -> dict[str, Any]:
    if args.payload_file is not None:
        with args.payload_file.open("r", encoding="utf-8") as file_handle:
            return json.load(file_handle)

    card: dict[str, Any] = {
        "type": "classic",
        "id": f"card-{uuid.uuid4().hex[:12]}",
        "created": time.time(),
        "dismissible": True,
        "title": "Generated card",
        "description": "Published by publish_cards_refreshed_event.py",
        "extras": {"class_type": args.class_type},
    }
    if args.url:
        card["url"] = args.url

    return {
        "is_successful": not args.failed,
        "cards": [card],
    }


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key, value = key.strip(), value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
