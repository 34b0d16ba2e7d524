"""Console stream client for debugging and development."""

import json

from tw_events.sinks.serialization import decode_payload


class ConsoleStreamClient:
    """Print records to stdout instead of writing them to a stream."""

    def __init__(self, pretty: bool = True) -> None:
        """Initialize console stream client.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        """
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write(self, stream_name: str, partition_key: str, data: bytes) -> None:
        """Print one record."""
        payload = decode_payload(data)
        print(f"{stream_name} [{partition_key}]")
        if self.pretty:
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(payload, ensure_ascii=False))

        self._counts[stream_name] = self._counts.get(stream_name, 0) + 1

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Stream Summary")
        print("=" * 60)
        for stream_name, count in self._counts.items():
            print(f"  {stream_name}: {count} records")
