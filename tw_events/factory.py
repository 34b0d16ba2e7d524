"""Build stream clients and decorated event buses from configuration."""

from __future__ import annotations

import logging

from tw_events.bus import EventBus
from tw_events.config import TWEventsConfig
from tw_events.context import SessionContext
from tw_events.decorator import StreamingEventBusDecorator
from tw_events.exceptions import ConfigurationError
from tw_events.sinks.base import StreamClient
from tw_events.sinks.console import ConsoleStreamClient
from tw_events.sinks.jsonl import JsonLinesStreamClient
from tw_events.sinks.kafka import KafkaStreamClient


def create_stream_client(config: TWEventsConfig) -> StreamClient:
    """Create the stream client selected by ``config.sink``."""
    if config.sink == "kafka":
        return KafkaStreamClient(config.kafka)
    elif config.sink == "console":
        return ConsoleStreamClient()
    elif config.sink == "jsonl":
        return JsonLinesStreamClient(config.output_dir)
    raise ConfigurationError(f"Unknown sink {config.sink!r}")


def create_event_bus(
    event_bus: EventBus,
    session: SessionContext,
    config: TWEventsConfig | None = None,
    stream_client: StreamClient | None = None,
    logger: logging.Logger | None = None,
) -> StreamingEventBusDecorator:
    """Wrap ``event_bus`` so business events are replicated to the stream.

    Parameters
    ----------
    event_bus : EventBus
        Bus to decorate.
    session : SessionContext
        Ambient identifiers provider.
    config : TWEventsConfig | None
        Defaults to ``TWEventsConfig.from_env()``.
    stream_client : StreamClient | None
        Overrides the client ``config.sink`` would select.
    logger : logging.Logger | None
        Logger for replication failures.
    """
    config = config or TWEventsConfig.from_env()
    client = stream_client or create_stream_client(config)

    return StreamingEventBusDecorator(
        event_bus,
        session,
        client,
        logger=logger,
        product_id=config.replication.product_id,
        stream_name=config.replication.stream_name,
    )
