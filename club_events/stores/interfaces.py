"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Backend failures are
raised as StoreError so callers never depend on a specific backend.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from club_events.domain import Event, EventId, PosterUpload, Registrant


class StoreError(Exception):
    """Raised when the underlying storage backend fails."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def insert_event(
        self,
        *,
        title: str,
        description: str,
        date: str,
        time: str,
        location: str,
        poster: str | None,
        created_by: int,
        club_name: str | None,
    ) -> None:
        """Insert a single event row."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, assignments: Sequence[tuple[str, str | None]]) -> int:
        """Apply the assignments to the event in one statement.

        Returns the number of rows affected, which is 0 for an unknown id.
        """
        ...

    @abstractmethod
    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        """Return all events created by the given actor."""
        ...

    @abstractmethod
    def list_registrants(self, event_id: EventId) -> list[Registrant]:
        """Return the students registered for an event."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> int:
        """Delete an event by ID and return the number of rows removed."""
        ...


class PosterStore(ABC):
    """Interface for the blob store holding event posters."""

    @abstractmethod
    def save(self, poster: PosterUpload) -> str:
        """Persist the poster and return its reference path."""
        ...
