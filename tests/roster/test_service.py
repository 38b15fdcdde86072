from unittest.mock import MagicMock

import pytest

from roster.engine import Direction
from roster.errors import InvalidTeam, MemberAlreadyPresent
from roster.models import Member
from roster.service import RosterService


class TestRosterService:
    def test_add_member_persists(self, roster_service, memory_store):
        roster_service.add_member("apm", Member(display_name="Dave", id="UD"))

        assert memory_store.saves == 1
        assert memory_store.state.teams["apm"].members[0].id == "UD"

    def test_failed_mutation_is_not_saved(self, roster_service, memory_store, alice):
        with pytest.raises(MemberAlreadyPresent):
            roster_service.add_member("cr", alice)

        assert memory_store.saves == 0

    def test_all_rejected_before_loading(self, registry, alice):
        store = MagicMock()
        service = RosterService(store=store, registry=registry)

        with pytest.raises(InvalidTeam):
            service.add_member("all", alice)

        store.load.assert_not_called()

    def test_remove_reports_reset(self, roster_service):
        member, reset = roster_service.remove_member("cr", "UC")

        assert member.display_name == "Carol"
        assert reset is True

    def test_remove_without_reset(self, roster_service, memory_store):
        member, reset = roster_service.remove_member("cr", "UA")

        assert reset is False
        assert memory_store.state.teams["cr"].current_tick == 1

    def test_advance_returns_next_in_line(self, roster_service, memory_store):
        upcoming = roster_service.advance("cr", Direction.FORWARD)

        assert upcoming.display_name == "Alice"
        assert memory_store.state.teams["cr"].current_tick == 0

    def test_advance_empty_team(self, roster_service):
        assert roster_service.advance("apm", Direction.BACK) is None

    def test_rotate_all_covers_every_team(self, roster_service, memory_store):
        assignments = roster_service.rotate_all()

        assert [a.team for a in assignments] == ["cr", "rum", "apm", "ss"]
        assert assignments[0].member.display_name == "Carol"
        assert memory_store.saves == 1
        assert memory_store.state.teams["cr"].current_tick == 0

    def test_this_week_reads_previous_without_saving(self, roster_service, memory_store):
        announced = roster_service.rotate_all()

        this_week = roster_service.this_week()

        assert this_week == announced
        assert memory_store.saves == 1
