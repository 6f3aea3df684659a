"""Pytest configuration and shared fixtures."""

import itertools
from collections.abc import Sequence
from datetime import date, time

import pytest
from rest_framework.test import APIClient

from club_events.domain import Actor, Event, EventId, PosterUpload, Registrant
from club_events.stores.interfaces import EventStore, PosterStore, StoreError

CHESS_ADMIN = {"id": 1, "role": "club_admin", "club_name": "Chess Club"}
DRAMA_ADMIN = {"id": 2, "role": "club_admin", "club_name": "Drama Club"}
STUDENT = {"id": 3, "role": "student", "club_name": None}


class InMemoryEventStore(EventStore):
    """EventStore double that records every call."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self.registrations: list[tuple[int, Registrant]] = []
        self.calls: list[str] = []
        self.fail = False
        self._ids = itertools.count(1)

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise StoreError(f"{name} failed")

    def insert_event(self, **fields) -> None:
        self._record("insert_event")
        self.rows[next(self._ids)] = fields

    def update_event(self, event_id: EventId, assignments: Sequence[tuple[str, str | None]]) -> int:
        self._record("update_event")
        row = self.rows.get(event_id.number)
        if row is None:
            return 0
        row.update(assignments)
        return 1

    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        self._record("list_events_by_creator")
        return [
            Event(
                id=EventId(str(pk)),
                title=row["title"],
                description=row["description"],
                date=date.fromisoformat(row["date"]),
                time=time.fromisoformat(row["time"]),
                location=row["location"],
                poster=row["poster"],
                created_by=row["created_by"],
                club_name=row["club_name"],
            )
            for pk, row in self.rows.items()
            if row["created_by"] == creator_id
        ]

    def list_registrants(self, event_id: EventId) -> list[Registrant]:
        self._record("list_registrants")
        return [student for pk, student in self.registrations if pk == event_id.number]

    def delete_event(self, event_id: EventId) -> int:
        self._record("delete_event")
        return 1 if self.rows.pop(event_id.number, None) is not None else 0


class RecordingPosterStore(PosterStore):
    """PosterStore double returning predictable references."""

    def __init__(self) -> None:
        self.saved: list[str] = []
        self.fail = False

    def save(self, poster: PosterUpload) -> str:
        if self.fail:
            raise StoreError("disk full")
        self.saved.append(poster.filename)
        return f"/uploads/{len(self.saved)}-{poster.filename}"


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def poster_store() -> RecordingPosterStore:
    return RecordingPosterStore()


@pytest.fixture
def admin() -> Actor:
    return Actor(**CHESS_ADMIN)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    # Sessions live in the cache backend.
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def login(api_client):
    """Place an identity in the client's session, as the login flow would."""

    def _login(user: dict) -> APIClient:
        session = api_client.session
        session["user"] = user
        session.save()
        return api_client

    return _login
