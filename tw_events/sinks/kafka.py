"""Kafka stream client for replicating records to Kafka topics."""

import logging
from dataclasses import dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from tw_events.config import KafkaConfig
from tw_events.exceptions import SinkError

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaStreamClient:
    """Write records to Kafka, using the stream name as the topic.

    The partition key becomes the message key, so records sharing a key
    land on the same partition.
    """

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka stream client.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = self._create_producer()
        self.stats = ProducerStats()

    def _create_producer(self) -> Producer:
        """Create Kafka producer with configuration."""
        return Producer(self.config.to_dict())

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def write(self, stream_name: str, partition_key: str, data: bytes) -> None:
        """Produce a single record to ``stream_name``.

        Raises
        ------
        SinkError
            If the producer rejects the record (queue full, unknown topic,
            broker unreachable at produce time).
        """
        try:
            self.producer.produce(
                topic=stream_name,
                key=partition_key.encode("utf-8"),
                value=data,
                callback=self._delivery_callback,
            )
        except (KafkaException, BufferError) as e:
            raise SinkError(f"Failed to produce to {stream_name}: {e}") from e

        self.stats.sent += 1
        self.producer.poll(0)

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        self.producer.flush(timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka stream client closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
