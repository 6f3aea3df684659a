from django.urls import path

from club_events.handlers import (
    EventCreateView,
    EventDetailView,
    MyEventsView,
    RegistrationListView,
)

urlpatterns = [
    path("events", EventCreateView.as_view(), name="event-create"),
    path("my-events", MyEventsView.as_view(), name="my-events"),
    path("event/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "event/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="event-registrations",
    ),
]
