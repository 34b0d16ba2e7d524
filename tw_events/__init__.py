"""Replicate business events fired on an event bus to an external stream."""

from tw_events.bus import EventBus, InMemoryEventBus
from tw_events.config import KafkaConfig, ReplicationConfig, TWEventsConfig
from tw_events.context import SessionContext, StaticSessionContext
from tw_events.decorator import ReplicationOutcome, StreamingEventBusDecorator
from tw_events.events import BusinessEvent, Event, TWEvent
from tw_events.exceptions import ConfigurationError, SinkError, TWEventsError
from tw_events.factory import create_event_bus, create_stream_client

__all__ = [
    "BusinessEvent",
    "ConfigurationError",
    "Event",
    "EventBus",
    "InMemoryEventBus",
    "KafkaConfig",
    "ReplicationConfig",
    "ReplicationOutcome",
    "SessionContext",
    "SinkError",
    "StaticSessionContext",
    "StreamingEventBusDecorator",
    "TWEvent",
    "TWEventsConfig",
    "TWEventsError",
    "create_event_bus",
    "create_stream_client",
]
