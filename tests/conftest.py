"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from tw_events.context import StaticSessionContext
from tw_events.decorator import StreamingEventBusDecorator
from tw_events.events import TWEvent


@pytest.fixture
def session() -> StaticSessionContext:
    """Session context with every identifier set."""
    return StaticSessionContext(
        platform_name="web",
        environment_name="production",
        user="12",
        customer="34",
        session="1234",
        request="5678",
    )


@pytest.fixture
def event_bus() -> MagicMock:
    """Inner event bus."""
    return MagicMock()


@pytest.fixture
def stream_client() -> MagicMock:
    """Stream client recording writes."""
    return MagicMock()


@pytest.fixture
def business_event() -> TWEvent:
    """Business event with a couple of attributes."""
    return TWEvent({"id": 1, "status": "active"}, name="event.created")


@pytest.fixture
def decorator(
    event_bus: MagicMock,
    session: StaticSessionContext,
    stream_client: MagicMock,
) -> StreamingEventBusDecorator:
    """Decorator wired to mock collaborators and the default logger."""
    return StreamingEventBusDecorator(event_bus, session, stream_client)
