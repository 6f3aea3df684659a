"""Tests for the Django ORM event store and the file-system poster store.

Run with: pytest tests/test_stores.py -v
"""

import io
import re
from datetime import date, time

import pytest
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import FileSystemStorage

from club_events import models
from club_events.domain import EventId, PosterUpload, Registrant
from club_events.stores.django_store import DjangoEventStore
from club_events.stores.file_store import FileSystemPosterStore
from club_events.stores.interfaces import StoreError


def _insert(store: DjangoEventStore, **overrides) -> models.Event:
    fields = {
        "title": "Finals Night",
        "description": "desc",
        "date": "2024-05-01",
        "time": "18:00",
        "location": "Hall A",
        "poster": None,
        "created_by": 1,
        "club_name": "Chess Club",
    }
    fields.update(overrides)
    store.insert_event(**fields)
    return models.Event.objects.latest("id")


@pytest.mark.django_db
class TestDjangoEventStore:
    """Tests for DjangoEventStore."""

    @pytest.fixture
    def store(self) -> DjangoEventStore:
        return DjangoEventStore()

    def test_insert_event_stores_row(self, store):
        row = _insert(store)

        assert row.date == date(2024, 5, 1)
        assert row.time == time(18, 0)
        assert row.created_by == 1
        assert row.club_name == "Chess Club"
        assert row.poster is None

    def test_insert_with_malformed_date_raises_store_error(self, store):
        with pytest.raises(StoreError):
            _insert(store, date="first of May")

    def test_update_event_changes_only_assigned_columns(self, store):
        row = _insert(store)

        affected = store.update_event(EventId(str(row.pk)), [("title", "New Title"), ("poster", "/uploads/1.png")])

        row.refresh_from_db()
        assert affected == 1
        assert row.title == "New Title"
        assert row.poster == "/uploads/1.png"
        assert row.description == "desc"
        assert row.created_by == 1

    def test_update_unknown_event_affects_nothing(self, store):
        assert store.update_event(EventId("999"), [("title", "Ghost")]) == 0

    def test_list_events_by_creator(self, store):
        mine = _insert(store)
        _insert(store, title="Opening Night", created_by=2, club_name="Drama Club")

        events = store.list_events_by_creator(1)

        assert [event.id for event in events] == [EventId(str(mine.pk))]
        assert events[0].title == "Finals Night"

    def test_list_registrants_joins_accounts(self, store):
        row = _insert(store)
        alice = models.Account.objects.create(name="Alice", email="alice@example.edu", role="student")
        bob = models.Account.objects.create(name="Bob", email="bob@example.edu", role="student")
        models.Registration.objects.create(event=row, student=alice)
        models.Registration.objects.create(event=row, student=bob)

        registrants = store.list_registrants(EventId(str(row.pk)))

        assert registrants == [
            Registrant(id=alice.pk, name="Alice", email="alice@example.edu"),
            Registrant(id=bob.pk, name="Bob", email="bob@example.edu"),
        ]

    def test_list_registrants_of_unknown_event_is_empty(self, store):
        assert store.list_registrants(EventId("999")) == []

    def test_delete_event_keeps_registrations(self, store):
        row = _insert(store)
        alice = models.Account.objects.create(name="Alice", email="alice@example.edu", role="student")
        models.Registration.objects.create(event=row, student=alice)

        assert store.delete_event(EventId(str(row.pk))) == 1

        assert not models.Event.objects.filter(pk=row.pk).exists()
        assert models.Registration.objects.filter(event_id=row.pk).count() == 1

    def test_delete_unknown_event_affects_nothing(self, store):
        assert store.delete_event(EventId("999")) == 0

    def test_non_numeric_id_matches_no_row(self, store):
        row = _insert(store)

        assert store.update_event(EventId("abc"), [("title", "Ghost")]) == 0
        assert store.list_registrants(EventId("abc")) == []
        assert store.delete_event(EventId("abc")) == 0

        row.refresh_from_db()
        assert row.title == "Finals Night"


class TestFileSystemPosterStore:
    """Tests for FileSystemPosterStore."""

    def test_save_returns_uploads_reference_with_extension(self, media_root):
        store = FileSystemPosterStore()

        reference = store.save(PosterUpload(filename="poster.png", content=io.BytesIO(b"\x89PNG")))

        assert re.fullmatch(r"/uploads/\d+\.png", reference)
        stored = media_root / reference.removeprefix("/uploads/")
        assert stored.read_bytes() == b"\x89PNG"

    def test_generated_names_are_unique(self, media_root):
        store = FileSystemPosterStore()

        references = {
            store.save(PosterUpload(filename="a.jpg", content=io.BytesIO(b"x"))) for _ in range(5)
        }

        assert len(references) == 5

    def test_storage_failure_raises_store_error(self):
        class BrokenStorage(FileSystemStorage):
            def save(self, name, content, max_length=None):
                raise PermissionError("read-only file system")

        store = FileSystemPosterStore(storage=BrokenStorage())

        with pytest.raises(StoreError):
            store.save(PosterUpload(filename="poster.png", content=io.BytesIO(b"x")))

    def test_rejected_file_name_raises_store_error(self):
        class SuspiciousStorage(FileSystemStorage):
            def save(self, name, content, max_length=None):
                raise SuspiciousFileOperation(f"Detected path traversal attempt in {name!r}")

        store = FileSystemPosterStore(storage=SuspiciousStorage())

        with pytest.raises(StoreError):
            store.save(PosterUpload(filename="poster.png", content=io.BytesIO(b"x")))

    def test_nul_in_extension_raises_store_error(self, media_root):
        store = FileSystemPosterStore()

        with pytest.raises(StoreError):
            store.save(PosterUpload(filename="poster.p\x00ng", content=io.BytesIO(b"x")))
