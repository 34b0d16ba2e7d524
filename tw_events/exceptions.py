"""Custom exception hierarchy for tw-events."""


class TWEventsError(Exception):
    """Base exception for all tw-events errors."""


class ConfigurationError(TWEventsError):
    """Raised when configuration is invalid or missing."""


class SinkError(TWEventsError):
    """Raised when a stream client fails to write a record."""
