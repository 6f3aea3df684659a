"""Access guard for administrative event operations."""

import logging

from club_events.domain import Actor
from club_events.domain.errors import ForbiddenError

logger = logging.getLogger(__name__)


def require_club_admin(actor: Actor | None) -> Actor:
    """Return the actor if it may manage events.

    Raises:
        ForbiddenError: If there is no actor or its role is not club_admin.
    """
    if actor is None or not actor.is_club_admin:
        logger.warning(
            "Rejected event operation for actor %s",
            actor.id if actor is not None else "<anonymous>",
        )
        raise ForbiddenError()
    return actor
