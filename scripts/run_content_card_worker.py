#!/usr/bin/env python3
"""Run the Kafka content card worker.

This worker consumes `content_cards.refreshed` events (topic from
`KAFKA_TOPIC_CONTENT_CARDS_REFRESHED`) and converts the class types listed in
`CONTENT_CARDS_CLASS_TYPES`, a comma-separated list of raw dashboard tags
(default `message_full_page,message_webview`; unrecognized tags other than
`unknown` stop the worker). When `KAFKA_TOPIC_CONTENT_CARD_MESSAGES` is set,
each converted message is published there as JSON.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from content_cards.adapters.kafka_runtime import run_content_card_worker_forever  # noqa: E402


def main() -> int:
    parse_args()
    _load_env_file(REPO_ROOT / ".env")
    return run_content_card_worker_forever()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run Kafka consumer loop for content card refreshes.",
        epilog=(
            "Environment: KAFKA_BOOTSTRAP_SERVERS (required), "
            "KAFKA_TOPIC_CONTENT_CARDS_REFRESHED, "
            "CONTENT_CARDS_CLASS_TYPES (raw tags, default "
            "message_full_page,message_webview), "
            "KAFKA_TOPIC_CONTENT_CARD_MESSAGES (optional output topic)."
        ),
    )
    return parser.parse_args()


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    for line in path.read_text(encoding="utf-8").splitlines():
        text = line.strip()
        if not text or text.startswith("#") or "=" not in text:
            continue
        key, value = text.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if value.startswith(("'", '"')) and value.endswith(("'", '"')) and len(value) >= 2:
            value = value[1:-1]
        os.environ.setdefault(key, value)


if __name__ == "__main__":
    sys.exit(main())
