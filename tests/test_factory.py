"""Tests for wiring helpers."""

import tempfile
from unittest.mock import MagicMock, patch

import pytest

from tw_events.bus import InMemoryEventBus
from tw_events.config import ReplicationConfig, TWEventsConfig
from tw_events.context import StaticSessionContext
from tw_events.decorator import StreamingEventBusDecorator
from tw_events.events import TWEvent
from tw_events.exceptions import ConfigurationError
from tw_events.factory import create_event_bus, create_stream_client
from tw_events.sinks.console import ConsoleStreamClient
from tw_events.sinks.jsonl import JsonLinesStreamClient
from tw_events.sinks.kafka import KafkaStreamClient


class TestCreateStreamClient:
    """Tests for create_stream_client."""

    @patch("tw_events.sinks.kafka.Producer")
    def test_kafka(self, mock_producer_class: MagicMock) -> None:
        client = create_stream_client(TWEventsConfig(sink="kafka"))

        assert isinstance(client, KafkaStreamClient)
        mock_producer_class.assert_called_once()

    def test_console(self) -> None:
        assert isinstance(create_stream_client(TWEventsConfig(sink="console")), ConsoleStreamClient)

    def test_jsonl(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            client = create_stream_client(TWEventsConfig(sink="jsonl", output_dir=tmpdir))

            assert isinstance(client, JsonLinesStreamClient)

    def test_unknown_sink(self) -> None:
        config = TWEventsConfig()
        config.sink = "smtp"

        with pytest.raises(ConfigurationError):
            create_stream_client(config)


class TestCreateEventBus:
    """Tests for create_event_bus."""

    def test_uses_replication_config(self, session: StaticSessionContext) -> None:
        config = TWEventsConfig(
            sink="console",
            replication=ReplicationConfig(product_id=5, stream_name="tw_events-other"),
        )
        client = MagicMock()

        bus = create_event_bus(InMemoryEventBus(), session, config=config, stream_client=client)

        assert isinstance(bus, StreamingEventBusDecorator)
        assert bus.product_id == 5
        assert bus.stream_name == "tw_events-other"
        assert bus.stream_client is client

    def test_builds_client_from_config(self, session: StaticSessionContext) -> None:
        bus = create_event_bus(InMemoryEventBus(), session, config=TWEventsConfig(sink="console"))

        assert isinstance(bus.stream_client, ConsoleStreamClient)

    def test_end_to_end_with_jsonl(self, session: StaticSessionContext) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = TWEventsConfig(sink="jsonl", output_dir=tmpdir)
            inner = InMemoryEventBus()
            received = []
            inner.subscribe(received.append)
            event = TWEvent({"id": 1}, name="event.created")

            create_event_bus(inner, session, config=config).publish(event)

            path = JsonLinesStreamClient(tmpdir).path_for("tw_events-massagebook-production")
            content = path.read_text(encoding="utf-8")

        assert received == [event]
        assert '"partition_key": "17-34"' in content
        assert '"name": "event.created"' in content

    def test_defaults_to_env_config(self, session: StaticSessionContext) -> None:
        with patch("tw_events.factory.TWEventsConfig.from_env") as mock_from_env:
            mock_from_env.return_value = TWEventsConfig(sink="console")

            bus = create_event_bus(InMemoryEventBus(), session)

        mock_from_env.assert_called_once()
        assert isinstance(bus.stream_client, ConsoleStreamClient)
