"""Event bus decorator replicating business events to an external stream."""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Any

from tw_events.bus import EventBus
from tw_events.context import SessionContext
from tw_events.events import BusinessEvent
from tw_events.sinks.base import StreamClient
from tw_events.sinks.serialization import encode_payload

logger = logging.getLogger(__name__)


class ReplicationOutcome(str, Enum):
    SKIPPED = "SKIPPED"
    SENT = "SENT"
    FAILED = "FAILED"


class StreamingEventBusDecorator:
    """Publish events on a wrapped bus, copying business events to a stream.

    Every event goes to the wrapped bus exactly once, whatever happens on the
    stream side. Events satisfying ``BusinessEvent`` are first written to the
    stream once, best effort: a failed write is logged and forgotten.

    Parameters
    ----------
    event_bus : EventBus
        The authoritative bus. Its errors reach the caller unchanged.
    session : SessionContext
        Source of user, customer, session and request identifiers, read on
        every publish.
    stream_client : StreamClient
        Client used to write replicated records.
    logger : logging.Logger | None
        Receives an error entry when a write fails.
    product_id : int
        Product identifier stamped on every record and used in the
        partition key.
    stream_name : str
        Destination stream.
    """

    PRODUCT_ID = 17

    STREAM_NAME = "tw_events-massagebook-production"

    FAILURE_MESSAGE = "failed to send event to sink"

    def __init__(
        self,
        event_bus: EventBus,
        session: SessionContext,
        stream_client: StreamClient,
        logger: logging.Logger | None = None,
        product_id: int = PRODUCT_ID,
        stream_name: str = STREAM_NAME,
    ) -> None:
        self.event_bus = event_bus
        self.session = session
        self.stream_client = stream_client
        self.logger = logger or logging.getLogger(__name__)
        self.product_id = product_id
        self.stream_name = stream_name

    def publish(self, event: Any) -> None:
        """Replicate ``event`` if it is a business event, then publish it."""
        outcome = self._replicate(event)
        logger.debug("Replication %s for %r", outcome.value, event)

        self.event_bus.publish(event)

    def _replicate(self, event: Any) -> ReplicationOutcome:
        if not isinstance(event, BusinessEvent):
            return ReplicationOutcome.SKIPPED

        customer_id = self.session.customer_id()
        payload = self.build_payload(event, customer_id)

        try:
            self.stream_client.write(
                self.stream_name,
                self.partition_key(customer_id),
                encode_payload(payload),
            )
        except Exception as e:
            self.logger.error(
                self.FAILURE_MESSAGE,
                extra={"fields": {"exception": e, "event": event}},
            )
            return ReplicationOutcome.FAILED

        return ReplicationOutcome.SENT

    def build_payload(self, event: BusinessEvent, customer_id: str | None) -> dict[str, Any]:
        """Build the record written to the stream for ``event``.

        ``customer_id`` is read once per publish by the caller so the record
        body and its partition key always agree.
        """
        return {
            "product_id": self.product_id,
            "tw_event": {
                "name": event.name,
                "attributes": event.attributes,
            },
            "identity": {
                "user_id": self.session.user_id(),
                "customer_id": customer_id,
            },
            "context": {
                "unix_timestamp": int(time.time()),
                "platform": self.session.platform(),
                "environment": self.session.environment(),
                "session_id": self.session.session_id(),
                "request_id": self.session.request_id(),
            },
        }

    def partition_key(self, customer_id: str | None) -> str:
        """Key routing the record to a shard for ``customer_id``."""
        return f"{self.product_id}-{customer_id if customer_id is not None else ''}"
