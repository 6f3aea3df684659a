"""Unit tests for the club admin access guard."""

import pytest

from club_events.access import require_club_admin
from club_events.domain import Actor
from club_events.domain.errors import ErrorCode, ForbiddenError
from club_events.handlers.identity import actor_from_session


def test_club_admin_is_allowed():
    actor = Actor(id=1, role="club_admin", club_name="Chess Club")

    assert require_club_admin(actor) is actor


@pytest.mark.parametrize("actor", [None, Actor(id=3, role="student")])
def test_missing_or_wrong_role_is_forbidden(actor):
    with pytest.raises(ForbiddenError) as excinfo:
        require_club_admin(actor)

    assert excinfo.value.code is ErrorCode.FORBIDDEN
    assert excinfo.value.message == "Forbidden"


class TestActorFromSession:
    """Tests for reading the actor out of the session."""

    def test_reads_user_mapping(self):
        actor = actor_from_session({"user": {"id": "1", "role": "club_admin", "club_name": "Chess Club"}})

        assert actor == Actor(id=1, role="club_admin", club_name="Chess Club")

    @pytest.mark.parametrize(
        "session",
        [
            {},
            {"user": None},
            {"user": "club_admin"},
            {"user": {"role": "club_admin"}},
            {"user": {"id": "x", "role": "club_admin"}},
        ],
    )
    def test_unusable_identity_yields_none(self, session):
        assert actor_from_session(session) is None
