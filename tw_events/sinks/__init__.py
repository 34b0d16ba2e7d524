"""Stream clients the decorator can replicate events to."""

from tw_events.sinks.base import StreamClient
from tw_events.sinks.console import ConsoleStreamClient
from tw_events.sinks.jsonl import JsonLinesStreamClient
from tw_events.sinks.kafka import KafkaStreamClient

__all__ = ["ConsoleStreamClient", "JsonLinesStreamClient", "KafkaStreamClient", "StreamClient"]
