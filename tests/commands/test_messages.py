from datetime import timedelta

from commands import messages
from roster.models import Assignment, Member, RosterState


class TestRosterText:
    def test_current_marks_previous_assignee(self, roster_state):
        text = messages.roster_text(roster_state, ["cr"])

        assert text == "*CR roster:*\n- Alice\n- *Bob - Current*\n- Carol"

    def test_next_marks_tick(self, roster_state):
        text = messages.roster_text(roster_state, ["cr"], upcoming=True)

        assert text == "*CR roster:*\n- Alice\n- Bob\n- *Carol - Next*"

    def test_all_teams_separated(self, roster_state):
        text = messages.roster_text(roster_state, ["cr", "rum", "apm", "ss"])

        assert text.count(messages.RULE) == 3
        assert "*APM roster:*\n_No members yet_" in text

    def test_no_teams(self):
        text = messages.roster_text(RosterState(), [])

        assert text == "No teams are configured."


class TestAnnouncementText:
    def test_format(self):
        text = messages.announcement_text(
            [Assignment("cr", Member(display_name="Alice", id="UA")), Assignment("apm", None)]
        )

        assert text == "*This week's intercom assignees:*\nCR - Alice - <@UA>\nAPM - no members"


class TestStartedText:
    def test_breakdown(self):
        text = messages.started_text(timedelta(days=4, hours=18, minutes=30, seconds=59))

        assert text == "I've started! Next assignment in 4 days, 18 hours & 30 minutes"


class TestHelpText:
    def test_lists_commands_and_teams(self):
        text = messages.help_text("@SupportRoster", ("cr", "rum"))

        for keyword in ("showCurrentRoster", "showNextRoster", "start", "pause", "recall", "add", "remove", "skip", "back"):
            assert f"`@SupportRoster {keyword}" in text
        assert "[all|cr|rum]" in text
