"""Read-only access to the ambient request, user and session identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class SessionContext(Protocol):
    """Identifiers describing who fired an event and from where.

    ``platform`` and ``environment`` are always known; the others may be
    ``None`` (anonymous user, background job, no request).
    """

    def user_id(self) -> str | None: ...

    def customer_id(self) -> str | None: ...

    def platform(self) -> str: ...

    def environment(self) -> str: ...

    def session_id(self) -> str | None: ...

    def request_id(self) -> str | None: ...


@dataclass(frozen=True)
class StaticSessionContext:
    """Session context backed by fixed values.

    Suited to scripts and batch jobs where the identifiers do not change
    between events.
    """

    platform_name: str
    environment_name: str
    user: str | None = None
    customer: str | None = None
    session: str | None = None
    request: str | None = None

    def user_id(self) -> str | None:
        return self.user

    def customer_id(self) -> str | None:
        return self.customer

    def platform(self) -> str:
        return self.platform_name

    def environment(self) -> str:
        return self.environment_name

    def session_id(self) -> str | None:
        return self.session

    def request_id(self) -> str | None:
        return self.request
