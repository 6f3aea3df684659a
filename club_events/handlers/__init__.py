from club_events.handlers.views import (
    EventCreateView,
    EventDetailView,
    MyEventsView,
    RegistrationListView,
)

__all__ = [
    "EventCreateView",
    "EventDetailView",
    "MyEventsView",
    "RegistrationListView",
]
