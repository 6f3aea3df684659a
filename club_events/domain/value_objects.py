"""Domain primitives that enforce validity at creation time."""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import IO, Any, Self

from club_events.domain.errors import ValidationError

CLUB_ADMIN_ROLE = "club_admin"


@dataclass(frozen=True)
class EventId:
    """Opaque identifier for an Event, as given in the request path.

    Existence is never checked, and an id that is not a number matches no row.
    """

    value: str

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    @property
    def number(self) -> int | None:
        """The numeric primary key, or None if the id is not an integer."""
        try:
            return int(self.value)
        except ValueError:
            return None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Actor:
    """The authenticated identity making a request."""

    id: int
    role: str
    club_name: str | None = None

    @property
    def is_club_admin(self) -> bool:
        return self.role == CLUB_ADMIN_ROLE


@dataclass(frozen=True)
class PosterUpload:
    """An uploaded poster file as received from the client."""

    filename: str
    content: IO[bytes]


@dataclass(frozen=True)
class EventDraft:
    """Input for creating an event. All five text fields are required."""

    title: str
    description: str
    date: str
    time: str
    location: str
    poster: PosterUpload | None = None

    REQUIRED_FIELDS = ("title", "description", "date", "time", "location")

    @classmethod
    def from_form(cls, form: Mapping[str, Any], poster: PosterUpload | None = None) -> Self:
        """Build a draft from submitted form fields.

        Values are taken as-is, without trimming.

        Raises:
            ValidationError: If any required field is absent or empty.
        """
        values = {name: form.get(name) for name in cls.REQUIRED_FIELDS}
        if any(value is None or value == "" for value in values.values()):
            raise ValidationError("Missing required fields")
        return cls(**values, poster=poster)


@dataclass(frozen=True)
class PatchField:
    """An updatable column and how to read it from a patch."""

    name: str
    accessor: Callable[["EventPatch"], str | None]


@dataclass(frozen=True)
class EventPatch:
    """The subset of an event's fields a caller wishes to modify."""

    title: str | None = None
    description: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    poster: PosterUpload | None = None

    @classmethod
    def from_form(cls, form: Mapping[str, Any], poster: PosterUpload | None = None) -> Self:
        """Build a patch from submitted form fields, ignoring unknown keys."""
        values = {
            field.name: form[field.name]
            for field in UPDATABLE_FIELDS
            if form.get(field.name) is not None
        }
        return cls(**values, poster=poster)

    def assignments(self) -> Iterator[tuple[str, str]]:
        """Yield (column, value) for every field present, in declaration order."""
        for field in UPDATABLE_FIELDS:
            value = field.accessor(self)
            if value is not None:
                yield field.name, value

    @property
    def is_empty(self) -> bool:
        return self.poster is None and next(self.assignments(), None) is None


# created_by and club_name are never updatable.
UPDATABLE_FIELDS: tuple[PatchField, ...] = (
    PatchField("title", lambda patch: patch.title),
    PatchField("description", lambda patch: patch.description),
    PatchField("date", lambda patch: patch.date),
    PatchField("time", lambda patch: patch.time),
    PatchField("location", lambda patch: patch.location),
)
