"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses (see exceptions.py)
- Never contain business logic
- Never expose internal error details
"""

from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from club_events.domain import EventId, PosterUpload
from club_events.handlers.permissions import IsClubAdmin
from club_events.handlers.serializers import (
    EventFormSerializer,
    EventSerializer,
    RegistrantSerializer,
)
from club_events.services.event_service import EventService
from club_events.stores.django_store import DjangoEventStore
from club_events.stores.file_store import FileSystemPosterStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore(), FileSystemPosterStore())


def _parse_form(request: Request) -> tuple[dict, PosterUpload | None]:
    serializer = EventFormSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    form = dict(serializer.validated_data)
    upload = request.FILES.get("poster")
    poster = PosterUpload(filename=upload.name, content=upload) if upload else None
    return form, poster


class ClubAdminView(APIView):
    """Base for every event management route: club admins only, no DRF auth."""

    authentication_classes: list = []
    permission_classes = [IsClubAdmin]
    parser_classes = [MultiPartParser, FormParser, JSONParser]


class EventCreateView(ClubAdminView):
    """Handler for POST /events"""

    def post(self, request: Request) -> Response:
        form, poster = _parse_form(request)
        get_event_service().create_event(request.actor, form, poster)
        return Response({"message": "Event created successfully"})


class MyEventsView(ClubAdminView):
    """Handler for GET /my-events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_my_events(request.actor)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(ClubAdminView):
    """Handler for PUT and DELETE /event/{event_id}"""

    def put(self, request: Request, event_id: str) -> Response:
        form, poster = _parse_form(request)
        get_event_service().update_event(request.actor, EventId.from_string(event_id), form, poster)
        return Response({"message": "Event updated successfully"})

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(request.actor, EventId.from_string(event_id))
        return Response({"message": "Event deleted successfully"})


class RegistrationListView(ClubAdminView):
    """Handler for GET /event/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        registrants = get_event_service().list_registrations(request.actor, EventId.from_string(event_id))
        return Response(RegistrantSerializer(registrants, many=True).data)
