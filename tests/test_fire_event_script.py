"""Tests for the fire_event script."""

import importlib.util
import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tw_events.exceptions import ConfigurationError

SCRIPT = Path(__file__).parent.parent / "scripts" / "fire_event.py"


@pytest.fixture
def fire_event(monkeypatch: pytest.MonkeyPatch):
    """Load the script as a module, leaving root logging untouched."""
    spec = importlib.util.spec_from_file_location("fire_event", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "setup_logging", lambda *args: None)
    return module


class TestFireEvent:
    """Tests for the CLI entry point."""

    def test_console_sink(self, fire_event, capsys: pytest.CaptureFixture) -> None:
        with patch.dict(os.environ, {"TW_SINK": "kafka"}):
            code = fire_event.main(
                ["booking.created", '{"id": 1}', "--sink", "console", "--customer", "34"]
            )
        captured = capsys.readouterr()

        assert code == 0
        assert "tw_events-massagebook-production [17-34]" in captured.out
        assert '"name": "booking.created"' in captured.out
        assert '"platform": "cli"' in captured.out

    def test_jsonl_sink(self, fire_event, tmp_path: Path) -> None:
        code = fire_event.main(
            ["booking.created", "--sink", "jsonl", "--output-dir", str(tmp_path)]
        )

        assert code == 0
        assert (tmp_path / "tw_events-massagebook-production.jsonl").exists()

    def test_invalid_attributes(self, fire_event) -> None:
        with pytest.raises(SystemExit):
            fire_event.main(["booking.created", "not json", "--sink", "console"])

    def test_attributes_must_be_object(self, fire_event) -> None:
        with pytest.raises(SystemExit):
            fire_event.main(["booking.created", "[1, 2]", "--sink", "console"])

    def test_client_closed_when_local_handler_fails(self, fire_event) -> None:
        client = MagicMock()

        with patch.object(fire_event, "create_stream_client", return_value=client), patch.object(
            fire_event.InMemoryEventBus, "publish", side_effect=RuntimeError("handler failed")
        ):
            with pytest.raises(RuntimeError):
                fire_event.main(["booking.created", "--sink", "console"])

        client.write.assert_called_once()
        client.close.assert_called_once_with()

    def test_sink_option_overrides_bad_env(self, fire_event, capsys: pytest.CaptureFixture) -> None:
        with patch.dict(os.environ, {"TW_SINK": "kinesis"}):
            code = fire_event.main(["booking.created", "--sink", "console", "--customer", "34"])
        captured = capsys.readouterr()

        assert code == 0
        assert "tw_events-massagebook-production [17-34]" in captured.out

    def test_bad_env_sink_without_option_fails(self, fire_event) -> None:
        with patch.dict(os.environ, {"TW_SINK": "kinesis"}):
            with pytest.raises(ConfigurationError):
                fire_event.main(["booking.created"])
