"""Event types dispatched through an event bus.

Two shapes exist:

- ``Event``: anything that happened, carrying opaque ``data`` and
  ``metadata`` maps.
- ``BusinessEvent``: a capability for events that also expose a stable
  ``name`` and flattened ``attributes``. Only these are replicated to the
  external stream.

``TWEvent`` is the convenience base that satisfies both.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Protocol, runtime_checkable


class Event:
    """Base event carrying a data map and a metadata map."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        metadata: Mapping[str, Any] | None = None,
    ) -> None:
        self._data = dict(data or {})
        self._metadata = dict(metadata or {})

    @property
    def data(self) -> dict[str, Any]:
        """The data associated with the event (a fresh copy on each access)."""
        return dict(self._data)

    @property
    def metadata(self) -> dict[str, Any]:
        """Metadata associated with the event (a fresh copy on each access)."""
        return dict(self._metadata)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(data={self._data!r}, metadata={self._metadata!r})"


@runtime_checkable
class BusinessEvent(Protocol):
    """Capability of events eligible for replication.

    Any object exposing ``name``, ``attributes`` and ``serialize`` qualifies,
    whether or not it derives from ``Event``.
    """

    @property
    def name(self) -> str:
        """Stable event name, e.g. ``booking.created``."""
        ...

    @property
    def attributes(self) -> dict[str, Any]:
        """Flattened attributes of the event."""
        ...

    def serialize(self) -> dict[str, Any]:
        """Return ``{"name": ..., "attributes": ...}``."""
        ...


class TWEvent(Event):
    """Event with a business name whose attributes are its data.

    The name is resolved when the event is built: an explicit ``name``
    argument wins, then the ``EVENT_NAME`` class constant, then the name of
    the class that defined the event.

    Examples
    --------
    >>> class BookingCreated(TWEvent):
    ...     EVENT_NAME = "booking.created"
    >>> BookingCreated({"id": 1}).serialize()
    {'name': 'booking.created', 'attributes': {'id': 1}}
    """

    EVENT_NAME: ClassVar[str | None] = None

    _default_name: ClassVar[str] = "TWEvent"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._default_name = cls.EVENT_NAME if cls.EVENT_NAME is not None else cls.__name__

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        metadata: Mapping[str, Any] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        super().__init__(data, metadata)
        self._name = name if name is not None else self._default_name

    @property
    def name(self) -> str:
        return self._name

    @property
    def attributes(self) -> dict[str, Any]:
        return self.data

    def serialize(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "attributes": self.attributes,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, data={self._data!r})"
