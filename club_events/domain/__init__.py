from club_events.domain.models import Event, Registrant
from club_events.domain.value_objects import (
    Actor,
    EventDraft,
    EventId,
    EventPatch,
    PosterUpload,
)

__all__ = [
    "Event",
    "Registrant",
    "Actor",
    "EventId",
    "EventDraft",
    "EventPatch",
    "PosterUpload",
]
