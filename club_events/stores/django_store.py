"""Django ORM implementation of the EventStore."""

from collections.abc import Sequence

from django.core.exceptions import ValidationError as FieldValidationError
from django.db import DatabaseError

from club_events import models
from club_events.domain import Event, EventId, Registrant
from club_events.stores.interfaces import EventStore, StoreError

# Malformed dates and times surface as field validation errors before any SQL runs.
BACKEND_ERRORS = (DatabaseError, FieldValidationError)


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(str(row.pk)),
        title=row.title,
        description=row.description,
        date=row.date,
        time=row.time,
        location=row.location,
        poster=row.poster,
        created_by=row.created_by,
        club_name=row.club_name,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

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
        try:
            models.Event.objects.create(
                title=title,
                description=description,
                date=date,
                time=time,
                location=location,
                poster=poster,
                created_by=created_by,
                club_name=club_name,
            )
        except BACKEND_ERRORS as exc:
            raise StoreError("insert into events failed") from exc

    def update_event(self, event_id: EventId, assignments: Sequence[tuple[str, str | None]]) -> int:
        if event_id.number is None:
            return 0
        try:
            return models.Event.objects.filter(pk=event_id.number).update(**dict(assignments))
        except BACKEND_ERRORS as exc:
            raise StoreError(f"update of event {event_id} failed") from exc

    def list_events_by_creator(self, creator_id: int) -> list[Event]:
        try:
            return [_to_domain(row) for row in models.Event.objects.filter(created_by=creator_id)]
        except BACKEND_ERRORS as exc:
            raise StoreError(f"listing events of {creator_id} failed") from exc

    def list_registrants(self, event_id: EventId) -> list[Registrant]:
        if event_id.number is None:
            return []
        try:
            rows = (
                models.Registration.objects.filter(event_id=event_id.number)
                .select_related("student")
                .order_by("id")
            )
            return [
                Registrant(id=row.student.pk, name=row.student.name, email=row.student.email)
                for row in rows
            ]
        except BACKEND_ERRORS as exc:
            raise StoreError(f"listing registrations of event {event_id} failed") from exc

    def delete_event(self, event_id: EventId) -> int:
        if event_id.number is None:
            return 0
        try:
            _, per_model = models.Event.objects.filter(pk=event_id.number).delete()
        except BACKEND_ERRORS as exc:
            raise StoreError(f"delete of event {event_id} failed") from exc
        return per_model.get(models.Event._meta.label, 0)
