from rest_framework.permissions import BasePermission
from rest_framework.request import Request

from club_events.access import require_club_admin
from club_events.handlers.identity import actor_from_session


class IsClubAdmin(BasePermission):
    """Allow club admins only and attach the actor to the request as ``request.actor``."""

    def has_permission(self, request: Request, view) -> bool:
        request.actor = require_club_admin(actor_from_session(request.session))
        return True
