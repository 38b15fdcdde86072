from .engine import Direction
from .errors import (
    AmbiguousOrUnknownCommand,
    InvalidTeam,
    MemberAlreadyPresent,
    MemberNotFound,
    RosterError,
    UserRefNotResolved,
)
from .models import Assignment, Member, RosterState, Team
from .service import RosterService
from .store import DynamoRosterStore, JsonFileRosterStore, RosterStore
from .teams import ALL_TEAMS, TeamRegistry


__all__ = [
    "ALL_TEAMS",
    "AmbiguousOrUnknownCommand",
    "Assignment",
    "Direction",
    "DynamoRosterStore",
    "InvalidTeam",
    "JsonFileRosterStore",
    "Member",
    "MemberAlreadyPresent",
    "MemberNotFound",
    "RosterError",
    "RosterService",
    "RosterState",
    "RosterStore",
    "Team",
    "TeamRegistry",
    "UserRefNotResolved",
]
