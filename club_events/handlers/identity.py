"""Actor lookup from the identity context placed in the session by the login flow."""

from collections.abc import Mapping
from typing import Any

from club_events.domain import Actor

SESSION_USER_KEY = "user"


def actor_from_session(session: Mapping[str, Any]) -> Actor | None:
    """Return the session's actor, or None if no usable identity is present."""
    user = session.get(SESSION_USER_KEY)
    if not isinstance(user, Mapping):
        return None
    try:
        return Actor(
            id=int(user["id"]),
            role=str(user["role"]),
            club_name=user.get("club_name"),
        )
    except (KeyError, TypeError, ValueError):
        return None
