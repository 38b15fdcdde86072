from collections.abc import Iterable

from .errors import InvalidTeam


ALL_TEAMS = "all"


class TeamRegistry:
    """Closed set of team identifiers, fixed when the process starts."""

    def __init__(self, teams: Iterable[str]):
        names = tuple(dict.fromkeys(str(t) for t in teams))
        if ALL_TEAMS in names:
            raise ValueError(f"'{ALL_TEAMS}' is reserved and cannot be used as a team id")
        self._teams = names

    @property
    def teams(self) -> tuple[str, ...]:
        return self._teams

    @property
    def selectors(self) -> tuple[str, ...]:
        return (*self._teams, ALL_TEAMS)

    def __contains__(self, team: object) -> bool:
        return team in self._teams

    def __iter__(self):
        return iter(self._teams)

    def __len__(self) -> int:
        return len(self._teams)

    def resolve(self, team: str | None) -> str:
        """Return `team` if it names a real team. `all` is not a real team."""
        if team not in self._teams:
            raise InvalidTeam(team, self._teams)
        return team

    def expand(self, selector: str | None) -> list[str]:
        if selector == ALL_TEAMS:
            return list(self._teams)
        return [self.resolve(selector)]
