"""Configuration management for tw-events."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from tw_events.exceptions import ConfigurationError

DEFAULT_PRODUCT_ID = 17
DEFAULT_STREAM_NAME = "tw_events-massagebook-production"

SINK_TYPES = ("kafka", "console", "jsonl")


@dataclass
class KafkaConfig:
    """Kafka producer configuration."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class ReplicationConfig:
    """Where replicated business events are written."""

    product_id: int = DEFAULT_PRODUCT_ID
    stream_name: str = DEFAULT_STREAM_NAME


@dataclass
class TWEventsConfig:
    """Main configuration for tw-events."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    replication: ReplicationConfig = field(default_factory=ReplicationConfig)
    sink: str = "kafka"
    output_dir: Path = field(default_factory=lambda: Path("output"))
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.sink not in SINK_TYPES:
            raise ConfigurationError(
                f"Unknown sink {self.sink!r}, expected one of {', '.join(SINK_TYPES)}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> "TWEventsConfig":
        """Create config from environment variables.

        Keyword ``overrides`` replace the matching environment values before
        the config is validated, so an explicit ``sink`` wins over a bad
        ``TW_SINK``.
        """
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        product_id_str = os.getenv("TW_PRODUCT_ID", str(DEFAULT_PRODUCT_ID))
        try:
            product_id = int(product_id_str)
        except ValueError as e:
            raise ConfigurationError(
                f"TW_PRODUCT_ID must be an integer, got {product_id_str!r}"
            ) from e

        replication = ReplicationConfig(
            product_id=product_id,
            stream_name=os.getenv("TW_STREAM_NAME", DEFAULT_STREAM_NAME),
        )

        values: dict[str, Any] = {
            "kafka": kafka,
            "replication": replication,
            "sink": os.getenv("TW_SINK", "kafka"),
            "output_dir": Path(os.getenv("OUTPUT_DIR", "output")),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "log_format": os.getenv("LOG_FORMAT", "standard"),
        }
        values.update(overrides)

        return cls(**values)
