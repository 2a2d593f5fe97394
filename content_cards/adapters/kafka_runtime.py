"""Kafka transport adapters for content card refresh events.

Mental model refresher:
- This module is transport glue to Kafka itself.
- Each `content_cards.refreshed` record plays the part of the vendor SDK's
  "cards refreshed" notification: it replaces the in-memory card snapshot and
  the adapter converts it from the refresh observer callback.
- Classification and parsing rules still live in domain/application layers.
"""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Mapping

from ..domain.class_type import ContentCardClassType, classify
from ..domain.messages import ContentCardable
from .card_adapter import ContentCardAdapter
from .in_memory import InMemoryContentCardsClient
from .payload import parse_cards_refreshed_payload, serialize_message

MessagesHandler = Callable[[list[ContentCardable]], None]

DEFAULT_CLASS_TYPES = "message_full_page,message_webview"


def publish_cards_refreshed_event(
    payload: Mapping[str, Any],
    *,
    topic: str | None = None,
) -> dict[str, Any]:
    """Publish one `content_cards.refreshed` event to Kafka."""
    _KafkaConsumer, KafkaProducer, _TopicPartition, _OffsetAndMetadata = _import_kafka_python()
    bootstrap_servers = _bootstrap_servers_from_env()
    topic_name = topic or os.getenv(
        "KAFKA_TOPIC_CONTENT_CARDS_REFRESHED", "content_cards.refreshed"
    )
    send_timeout_seconds = float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"))

    producer = KafkaProducer(
        bootstrap_servers=bootstrap_servers,
        value_serializer=_serialize_json_object,
        acks=os.getenv("KAFKA_PRODUCER_ACKS", "all"),
    )
    try:
        future = producer.send(topic_name, value=dict(payload))
        metadata = future.get(timeout=send_timeout_seconds)
        producer.flush(timeout=send_timeout_seconds)
    finally:
        producer.close()

    return {
        "topic": metadata.topic,
        "partition": metadata.partition,
        "offset": metadata.offset,
    }


def run_content_card_worker_forever(on_messages: MessagesHandler | None = None) -> int:
    """Run the Kafka consumer loop that converts refreshed content cards.

    Converted messages go to `on_messages` when given, and are published as
    JSON to `KAFKA_TOPIC_CONTENT_CARD_MESSAGES` when that topic is configured.
    """
    KafkaConsumer, KafkaProducer, TopicPartition, OffsetAndMetadata = _import_kafka_python()
    bootstrap_servers = _bootstrap_servers_from_env()
    topic_name = os.getenv("KAFKA_TOPIC_CONTENT_CARDS_REFRESHED", "content_cards.refreshed")
    output_topic = os.getenv("KAFKA_TOPIC_CONTENT_CARD_MESSAGES", "").strip() or None
    group_id = os.getenv("KAFKA_GROUP_ID", "content-cards-worker")
    auto_offset_reset = os.getenv("KAFKA_AUTO_OFFSET_RESET", "earliest")
    poll_timeout_ms = _poll_timeout_ms_from_env()
    max_records = int(os.getenv("KAFKA_MAX_RECORDS_PER_POLL", "50"))
    send_timeout_seconds = float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"))
    class_types = _class_types_from_env()

    consumer = KafkaConsumer(
        topic_name,
        bootstrap_servers=bootstrap_servers,
        group_id=group_id,
        enable_auto_commit=False,
        auto_offset_reset=auto_offset_reset,
    )
    producer = (
        KafkaProducer(
            bootstrap_servers=bootstrap_servers,
            value_serializer=_serialize_json_object,
            acks=os.getenv("KAFKA_PRODUCER_ACKS", "all"),
        )
        if output_topic
        else None
    )

    client = InMemoryContentCardsClient()
    adapter = ContentCardAdapter(client)

    def on_refresh(is_successful: bool) -> None:
        messages = adapter.handle_content_cards_updated(is_successful, class_types)
        print(f"[CONVERTED] success={is_successful} messages={len(messages)}")
        if on_messages is not None:
            on_messages(messages)
        if producer is not None:
            for message in messages:
                future = producer.send(output_topic, value=serialize_message(message))
                future.get(timeout=send_timeout_seconds)

    adapter.add_observer_for_content_cards(on_refresh)
    print(
        f"[WORKER START] topic={topic_name} group_id={group_id} "
        f"output_topic={output_topic} "
        f"class_types={','.join(sorted(item.value for item in class_types))}"
    )

    try:
        while True:
            batches = consumer.poll(timeout_ms=poll_timeout_ms, max_records=max_records)
            if not batches:
                continue

            for _topic_partition, records in batches.items():
                for message in records:
                    message_topic = message.topic
                    message_partition = int(message.partition)
                    message_offset = int(message.offset)

                    try:
                        payload = _deserialize_json_object(message.value)
                        refreshed = parse_cards_refreshed_payload(payload)
                    except Exception as exc:
                        print(
                            f"[SKIP] topic={message_topic} partition={message_partition} "
                            f"offset={message_offset} reason=decode_failed: {exc}"
                        )
                    else:
                        client.replace_cards(
                            refreshed.cards, is_successful=refreshed.is_successful
                        )

                    offsets = {
                        TopicPartition(message_topic, message_partition): _offset_and_metadata(
                            OffsetAndMetadata, message_offset + 1
                        )
                    }
                    consumer.commit(offsets=offsets)
                    print(
                        "[COMMIT] "
                        f"topic={message_topic} partition={message_partition} "
                        f"offset={message_offset}"
                    )
    except KeyboardInterrupt:
        print("[WORKER STOP] received keyboard interrupt")
        return 0
    except Exception as exc:
        print(f"[WORKER ERROR] {exc}")
        return 1
    finally:
        consumer.close()
        if producer is not None:
            producer.flush(timeout=send_timeout_seconds)
            producer.close()


def _import_kafka_python() -> tuple[Any, Any, Any, Any]:
    try:
        from kafka import KafkaConsumer, KafkaProducer, TopicPartition
        from kafka.structs import OffsetAndMetadata
    except ImportError as exc:
        raise RuntimeError(
            "Kafka support requires `kafka-python`. Install with: pip install kafka-python"
        ) from exc
    return KafkaConsumer, KafkaProducer, TopicPartition, OffsetAndMetadata


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def _bootstrap_servers_from_env() -> list[str]:
    raw = _required_env("KAFKA_BOOTSTRAP_SERVERS")
    servers = [item.strip() for item in raw.split(",") if item.strip()]
    if not servers:
        raise RuntimeError("KAFKA_BOOTSTRAP_SERVERS must include at least one host:port")
    return servers


def _poll_timeout_ms_from_env() -> int:
    timeout_seconds = float(os.getenv("KAFKA_POLL_TIMEOUT_SECONDS", "1.0"))
    timeout_ms = int(timeout_seconds * 1000)
    if timeout_ms <= 0:
        raise RuntimeError("KAFKA_POLL_TIMEOUT_SECONDS must be > 0")
    return timeout_ms


def _class_types_from_env() -> frozenset[ContentCardClassType]:
    """Read wanted class types as raw dashboard tags, e.g. `message_webview`.

    `unknown` opts into the full page fallback for untagged cards; any other
    unrecognized tag is a configuration error.
    """
    raw = os.getenv("CONTENT_CARDS_CLASS_TYPES", DEFAULT_CLASS_TYPES)
    tags = [item.strip() for item in raw.split(",") if item.strip()]
    class_types = set()
    for tag in tags:
        class_type = classify(tag)
        if class_type is ContentCardClassType.UNKNOWN and tag.lower() != "unknown":
            raise RuntimeError(f"Unrecognized class type in CONTENT_CARDS_CLASS_TYPES: {tag!r}")
        class_types.add(class_type)
    if not class_types:
        raise RuntimeError("CONTENT_CARDS_CLASS_TYPES must include at least one class type")
    return frozenset(class_types)


def _serialize_json_object(payload: Mapping[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


def _deserialize_json_object(raw: bytes | str | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(raw, Mapping):
        return dict(raw)

    if isinstance(raw, bytes):
        text = raw.decode("utf-8")
    elif isinstance(raw, str):
        text = raw
    else:
        raise ValueError(f"Unsupported Kafka payload type: {type(raw).__name__}")

    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("Kafka payload must decode to a JSON object")
    return parsed


def _offset_and_metadata(offset_and_metadata_type: Any, offset: int) -> Any:
    """Build kafka-python OffsetAndMetadata across version signatures."""
    try:
        return offset_and_metadata_type(offset, "", -1)
    except TypeError:
        return offset_and_metadata_type(offset, "")
