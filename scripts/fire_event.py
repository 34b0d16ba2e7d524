#!/usr/bin/env python3
"""Fire a single business event through a replicating event bus.

The event is published on an in-memory bus wrapped by the streaming
decorator, so it is written to the configured stream (Kafka, console or a
JSON Lines file) and then dispatched locally.

Example:
    python scripts/fire_event.py booking.created '{"id": 1, "status": "active"}' \\
        --sink console --customer 34 --user 12
"""

import argparse
import json
import sys
import uuid
from pathlib import Path
from typing import Any

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tw_events.bus import InMemoryEventBus
from tw_events.config import TWEventsConfig
from tw_events.context import StaticSessionContext
from tw_events.events import TWEvent
from tw_events.factory import create_event_bus, create_stream_client
from tw_events.logging import get_logger, setup_logging

logger = get_logger("fire_event")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Fire a business event and replicate it to the event stream"
    )
    parser.add_argument("name", help="Event name, e.g. booking.created")
    parser.add_argument(
        "attributes",
        nargs="?",
        default="{}",
        help="Event attributes as a JSON object (default: {})",
    )
    parser.add_argument(
        "--sink",
        choices=["kafka", "console", "jsonl"],
        default=None,
        help="Stream client to use (default: TW_SINK or kafka)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for the jsonl sink (default: OUTPUT_DIR or ./output)",
    )
    parser.add_argument("--user", default=None, help="User ID")
    parser.add_argument("--customer", default=None, help="Customer ID")
    parser.add_argument("--platform", default="cli", help="Platform (default: cli)")
    parser.add_argument(
        "--environment",
        default="development",
        help="Environment (default: development)",
    )
    parser.add_argument("--session", default=None, help="Session ID")
    args = parser.parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.sink:
        overrides["sink"] = args.sink
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    config = TWEventsConfig.from_env(**overrides)
    setup_logging(config.log_level, config.log_format)

    try:
        attributes = json.loads(args.attributes)
    except json.JSONDecodeError as e:
        parser.error(f"attributes must be valid JSON: {e}")
    if not isinstance(attributes, dict):
        parser.error("attributes must be a JSON object")

    session = StaticSessionContext(
        platform_name=args.platform,
        environment_name=args.environment,
        user=args.user,
        customer=args.customer,
        session=args.session,
        request=str(uuid.uuid4()),
    )

    bus = InMemoryEventBus()
    bus.subscribe(lambda event: logger.info("Dispatched %s locally", event.name))

    client = create_stream_client(config)
    event_bus = create_event_bus(bus, session, config=config, stream_client=client)

    try:
        event_bus.publish(TWEvent(attributes, name=args.name))
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
