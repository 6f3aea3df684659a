"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in club_events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, time

from club_events.domain.value_objects import EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: date
    time: time
    location: str
    poster: str | None
    created_by: int
    club_name: str | None


@dataclass(frozen=True)
class Registrant:
    """A student registered for an event."""

    id: int
    name: str
    email: str
