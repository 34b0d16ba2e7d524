"""Shared serialization utilities for stream clients."""

import json
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return {f.name: serialize_value(getattr(value, f.name)) for f in fields(value)}
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def _default(value: Any) -> Any:
    serialized = serialize_value(value)
    if serialized is value:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
    return serialized


def encode_payload(payload: dict[str, Any]) -> bytes:
    """Encode a payload as compact UTF-8 JSON.

    Keys keep their insertion order, so the same payload always encodes to
    the same bytes.
    """
    return json.dumps(
        payload,
        ensure_ascii=False,
        separators=(",", ":"),
        default=_default,
    ).encode("utf-8")


def decode_payload(data: bytes) -> dict[str, Any]:
    """Decode bytes produced by ``encode_payload``."""
    return json.loads(data.decode("utf-8"))
