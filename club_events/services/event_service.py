"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Check access and validate input before any side effect
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from typing import Any

from club_events.access import require_club_admin
from club_events.domain import Actor, Event, EventDraft, EventId, EventPatch, PosterUpload, Registrant
from club_events.domain.errors import PersistenceError, ValidationError
from club_events.stores.interfaces import EventStore, PosterStore, StoreError

logger = logging.getLogger(__name__)


class EventService:
    """Service for club event management."""

    def __init__(self, store: EventStore, posters: PosterStore) -> None:
        self._store = store
        self._posters = posters

    def create_event(
        self,
        actor: Actor | None,
        form: Mapping[str, Any],
        poster: PosterUpload | None = None,
    ) -> None:
        """Create an event owned by the actor.

        The poster, if any, is stored before the row is inserted. A failed
        insert leaves that file orphaned.

        Raises:
            ForbiddenError: If the actor is not a club admin.
            ValidationError: If a required field is missing.
            PersistenceError: If the poster or the row cannot be stored.
        """
        actor = require_club_admin(actor)
        draft = EventDraft.from_form(form, poster)

        try:
            poster_ref = self._posters.save(draft.poster) if draft.poster else None
            self._store.insert_event(
                title=draft.title,
                description=draft.description,
                date=draft.date,
                time=draft.time,
                location=draft.location,
                poster=poster_ref,
                created_by=actor.id,
                club_name=actor.club_name,
            )
        except StoreError as exc:
            logger.exception("Error creating event for actor %s", actor.id)
            raise PersistenceError("Error creating event") from exc

        logger.info("Event %r created by actor %s", draft.title, actor.id)

    def update_event(
        self,
        actor: Actor | None,
        event_id: EventId,
        form: Mapping[str, Any],
        poster: PosterUpload | None = None,
    ) -> None:
        """Apply a partial update to an event.

        Only title, description, date, time and location can be changed,
        plus the poster when a new file is supplied. Unknown ids are not
        reported.

        Raises:
            ForbiddenError: If the actor is not a club admin.
            ValidationError: If nothing would be updated.
            PersistenceError: If the poster or the row cannot be stored.
        """
        actor = require_club_admin(actor)
        patch = EventPatch.from_form(form, poster)
        if patch.is_empty:
            raise ValidationError("No fields provided for update")

        assignments: list[tuple[str, str | None]] = list(patch.assignments())
        try:
            if patch.poster is not None:
                assignments.append(("poster", self._posters.save(patch.poster)))
            affected = self._store.update_event(event_id, assignments)
        except StoreError as exc:
            logger.exception("Error updating event %s", event_id)
            raise PersistenceError("Error updating event") from exc

        logger.info(
            "Event %s updated by actor %s (%s), %d row(s) affected",
            event_id,
            actor.id,
            ", ".join(name for name, _ in assignments),
            affected,
        )

    def list_my_events(self, actor: Actor | None) -> list[Event]:
        """Return every event the actor created.

        Raises:
            ForbiddenError: If the actor is not a club admin.
            PersistenceError: If the store fails.
        """
        actor = require_club_admin(actor)
        try:
            return self._store.list_events_by_creator(actor.id)
        except StoreError as exc:
            logger.exception("Error fetching events for actor %s", actor.id)
            raise PersistenceError("Error fetching events") from exc

    def list_registrations(self, actor: Actor | None, event_id: EventId) -> list[Registrant]:
        """Return the students registered for an event.

        An unknown event yields an empty list.

        Raises:
            ForbiddenError: If the actor is not a club admin.
            PersistenceError: If the store fails.
        """
        require_club_admin(actor)
        try:
            return self._store.list_registrants(event_id)
        except StoreError as exc:
            logger.exception("Error fetching registrations for event %s", event_id)
            raise PersistenceError("Error fetching registrations") from exc

    def delete_event(self, actor: Actor | None, event_id: EventId) -> None:
        """Delete an event. Registrations pointing at it are left in place.

        Raises:
            ForbiddenError: If the actor is not a club admin.
            PersistenceError: If the store fails.
        """
        actor = require_club_admin(actor)
        try:
            affected = self._store.delete_event(event_id)
        except StoreError as exc:
            logger.exception("Error deleting event %s", event_id)
            raise PersistenceError("Error deleting event") from exc

        logger.info("Event %s deleted by actor %s, %d row(s) affected", event_id, actor.id, affected)
