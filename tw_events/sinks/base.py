"""Contract for clients writing records to an external stream."""

from typing import Protocol


class StreamClient(Protocol):
    """Write one record to a named stream.

    Implementations may raise on transport failure; callers decide whether
    that matters.
    """

    def write(self, stream_name: str, partition_key: str, data: bytes) -> None:
        ...
