from datetime import timedelta

from roster import engine
from roster.models import Assignment, Member, RosterState, Team


RULE = "-----------------------------------------"

INTERNAL_ERROR = ":ambulance: He's dead Jim - please check the logs for errors..."


def help_text(bot_name: str, teams: tuple[str, ...]) -> str:
    real = "|".join(teams)
    return "\n".join(
        [
            "Here's a list of my available commands:",
            f"`{bot_name} showCurrentRoster [all|{real}]` - Lists a roster, marking this week's assignee",
            f"`{bot_name} showNextRoster [all|{real}]` - Lists a roster, marking who is up next",
            f"`{bot_name} start` - Starts the weekly announcements",
            f"`{bot_name} pause` - Pauses the weekly announcements (the roster is remembered)",
            f"`{bot_name} recall` - Recalls this week's assignees",
            f"`{bot_name} add [@user] [{real}]` - Adds a user to a team roster",
            f"`{bot_name} remove [@user] [{real}]` - Removes a user from a team roster",
            f"`{bot_name} skip [{real}]` - Moves forward one in the queue for a team",
            f"`{bot_name} back [{real}]` - Moves back one in the queue for a team",
        ]
    )


def _team_section(name: str, team: Team, marked: Member | None, label: str) -> list[str]:
    lines = [f"*{name.upper()} roster:*"]
    if team.is_empty:
        lines.append("_No members yet_")
        return lines

    for member in team.members:
        if marked is not None and member.id == marked.id:
            lines.append(f"- *{member.display_name} - {label}*")
        else:
            lines.append(f"- {member.display_name}")
    return lines


def roster_text(state: RosterState, teams: list[str], upcoming: bool = False) -> str:
    """
    `upcoming=False` marks the member announced this week (the tick has already
    moved past them); `upcoming=True` marks the member the next announcement names.
    """
    if not teams:
        return "No teams are configured."

    sections = []
    for name in teams:
        if upcoming:
            marked, label = engine.current_assignee(state, name), "Next"
        else:
            marked, label = engine.previous_assignee(state, name), "Current"
        sections.append("\n".join(_team_section(name, state.teams[name], marked, label)))

    return f"\n{RULE}\n".join(sections)


def announcement_text(assignments: list[Assignment]) -> str:
    lines = ["*This week's intercom assignees:*"]
    for team, member in assignments:
        if member is None:
            lines.append(f"{team.upper()} - no members")
        else:
            lines.append(f"{team.upper()} - {member.display_name} - {member.mention}")
    return "\n".join(lines)


def started_text(until_first: timedelta) -> str:
    minutes = int(until_first.total_seconds()) // 60
    days, minutes = divmod(minutes, 24 * 60)
    hours, minutes = divmod(minutes, 60)
    return f"I've started! Next assignment in {days} days, {hours} hours & {minutes} minutes"


def paused_text(bot_name: str) -> str:
    return f"I've paused! Type `{bot_name} start` to resume"


def added_text(member: Member, team: str) -> str:
    return f"I've just added {member.display_name} to the {team.upper()} roster!"


def removed_text(member: Member, team: str, reset: bool) -> str:
    text = f"I've just removed {member.display_name} from the {team.upper()} roster!"
    if reset:
        text += f"\nThey were next in line, so the {team.upper()} queue starts again from the top."
    return text


def moved_text(team: str, forward: bool, upcoming: Member | None) -> str:
    text = f"I've just moved the {team.upper()} roster queue {'forward' if forward else 'back'} one!"
    if upcoming is not None:
        text += f" Next up: {upcoming.display_name}"
    return text
