from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Member(BaseModel):
    display_name: str
    id: str

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Member):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class Team(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    members: list[Member] = Field(default_factory=list)
    current_tick: int = Field(default=0, alias="currentTick")

    @field_validator("members", mode="before")
    @classmethod
    def _accept_pairs(cls, value: Any) -> Any:
        # roster.json stores members as [display_name, id] pairs
        if not isinstance(value, list):
            return value
        return [
            {"display_name": item[0], "id": item[1]} if isinstance(item, (list, tuple)) else item for item in value
        ]

    @model_validator(mode="after")
    def _clamp_tick(self) -> "Team":
        if not 0 <= self.current_tick < max(len(self.members), 1):
            self.current_tick = 0
        return self

    @property
    def is_empty(self) -> bool:
        return not self.members

    def index_of(self, member_id: str) -> int | None:
        for i, member in enumerate(self.members):
            if member.id == member_id:
                return i
        return None


class RosterState(BaseModel):
    teams: dict[str, Team] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, document: dict, teams: tuple[str, ...] | list[str] = ()) -> "RosterState":
        """Build state from the stored document, adding an empty roster for any team it lacks."""
        state = cls(teams={name: Team.model_validate(data) for name, data in (document or {}).items()})
        for name in teams:
            state.teams.setdefault(name, Team())
        return state

    def to_document(self) -> dict:
        return {
            name: {
                "members": [[m.display_name, m.id] for m in team.members],
                "currentTick": team.current_tick,
            }
            for name, team in self.teams.items()
        }


class Assignment(NamedTuple):
    team: str
    member: Member | None
