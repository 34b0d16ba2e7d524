"""JSON Lines stream client for capturing records to files."""

import json
from pathlib import Path

from tw_events.exceptions import SinkError
from tw_events.sinks.serialization import decode_payload


class JsonLinesStreamClient:
    """Append records to ``<output_dir>/<stream_name>.jsonl``.

    Each line holds the partition key and the decoded payload.
    """

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize JSON Lines stream client.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON Lines files.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._counts: dict[str, int] = {}

    def path_for(self, stream_name: str) -> Path:
        """File backing ``stream_name``.

        Raises
        ------
        SinkError
            If the name is empty, a dot name, or contains a path separator.
        """
        if stream_name in ("", ".", "..") or "/" in stream_name or "\\" in stream_name:
            raise SinkError(f"Invalid stream name for a file: {stream_name!r}")
        return self.output_dir / f"{stream_name}.jsonl"

    def write(self, stream_name: str, partition_key: str, data: bytes) -> None:
        """Append one record."""
        line = {"partition_key": partition_key, "data": decode_payload(data)}
        with open(self.path_for(stream_name), "a", encoding="utf-8") as f:
            f.write(json.dumps(line, ensure_ascii=False) + "\n")

        self._counts[stream_name] = self._counts.get(stream_name, 0) + 1

    def close(self) -> None:
        """Print summary."""
        print(f"JSON Lines files written to: {self.output_dir}")
        for stream_name, count in self._counts.items():
            print(f"  {stream_name}: {count} records")
