"""
Rotation state machine.

Every function works on an already loaded RosterState and mutates it in place;
loading and saving around a call is the caller's job (see RosterService).
"""
from enum import Enum

from .errors import InvalidTeam, MemberAlreadyPresent, MemberNotFound
from .models import Assignment, Member, RosterState, Team
from .teams import ALL_TEAMS


class Direction(str, Enum):
    FORWARD = "forward"
    BACK = "back"


def get_team(state: RosterState, team: str | None) -> Team:
    if team == ALL_TEAMS or team not in state.teams:
        raise InvalidTeam(team, state.teams.keys())
    return state.teams[team]


def add_member(state: RosterState, team: str, member: Member) -> Team:
    """Append `member` to the end of the queue. The tick is untouched."""
    roster = get_team(state, team)
    if roster.index_of(member.id) is not None:
        raise MemberAlreadyPresent(member.display_name, team)

    roster.members.append(member)
    return roster


def remove_member(state: RosterState, team: str, member_id: str) -> Member:
    """
    Remove every entry with `member_id` and keep the tick valid.

    If the member the tick points at survives, the tick follows it to its new
    index. If that member is the one removed, the tick goes back to 0.
    """
    roster = get_team(state, team)
    index = roster.index_of(member_id)
    if index is None:
        raise MemberNotFound(f"<@{member_id}>", team)

    removed = roster.members[index]
    pointed = roster.members[roster.current_tick]

    if pointed.id == member_id:
        tick = 0
    else:
        tick = roster.current_tick - sum(1 for m in roster.members[: roster.current_tick] if m.id == member_id)

    roster.members = [m for m in roster.members if m.id != member_id]
    roster.current_tick = tick if roster.members else 0
    return removed


def advance_tick(state: RosterState, team: str, direction: Direction) -> int:
    roster = get_team(state, team)
    if roster.is_empty:
        roster.current_tick = 0
        return 0

    step = 1 if direction == Direction.FORWARD else -1
    roster.current_tick = (roster.current_tick + step) % len(roster.members)
    return roster.current_tick


def current_assignee(state: RosterState, team: str) -> Member | None:
    """The member the next announcement will name."""
    roster = get_team(state, team)
    if roster.is_empty:
        return None
    return roster.members[roster.current_tick]


def previous_assignee(state: RosterState, team: str) -> Member | None:
    """The member named by the last announcement, once the tick has moved past them."""
    roster = get_team(state, team)
    if roster.is_empty:
        return None
    return roster.members[(roster.current_tick - 1) % len(roster.members)]


def rotate(state: RosterState, teams: list[str]) -> list[Assignment]:
    """Capture each team's assignee, then move its tick forward."""
    assignments = []
    for team in teams:
        assignments.append(Assignment(team, current_assignee(state, team)))
        advance_tick(state, team, Direction.FORWARD)
    return assignments
