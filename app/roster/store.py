import json
from abc import ABC, abstractmethod
from pathlib import Path

import boto3
from aws_lambda_powertools import Logger

from .models import RosterState, Team
from .teams import TeamRegistry


logger = Logger(child=True)


class RosterStore(ABC):
    @abstractmethod
    def load(self) -> RosterState:
        pass

    @abstractmethod
    def save(self, state: RosterState) -> None:
        pass


class JsonFileRosterStore(RosterStore):
    """The roster.json file: {team: {"members": [[name, id], ...], "currentTick": n}}."""

    def __init__(self, path: str, registry: TeamRegistry):
        self._path = Path(path)
        self._registry = registry

    def load(self) -> RosterState:
        if not self._path.exists():
            logger.info("Roster file not found, starting empty", extra={"path": str(self._path)})
            return RosterState.from_document({}, self._registry.teams)

        with self._path.open(encoding="utf-8") as f:
            document = json.load(f)

        return RosterState.from_document(document, self._registry.teams)

    def save(self, state: RosterState) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")

        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(state.to_document(), f, ensure_ascii=False, indent=2)
        tmp_path.replace(self._path)

        logger.debug("Roster saved", extra={"path": str(self._path)})


class DynamoRosterStore(RosterStore):
    """One item per team: PK=ROSTER, SK=TEAM#<team>."""

    PARTITION_KEY = "ROSTER"

    def __init__(self, table_name: str, registry: TeamRegistry):
        self._registry = registry
        self._table = boto3.resource("dynamodb").Table(table_name)

    def load(self) -> RosterState:
        response = self._table.query(
            KeyConditionExpression="PK = :pk AND begins_with(SK, :sk)",
            ExpressionAttributeValues={":pk": self.PARTITION_KEY, ":sk": "TEAM#"},
        )

        teams = {}
        for item in response.get("Items", []):
            name = item["SK"].split("#", 1)[1]
            teams[name] = Team(
                members=[{"display_name": m.get("name", m["id"]), "id": m["id"]} for m in item.get("members", [])],
                current_tick=int(item.get("current_tick", 0)),
            )

        state = RosterState(teams=teams)
        for name in self._registry.teams:
            state.teams.setdefault(name, Team())
        return state

    def save(self, state: RosterState) -> None:
        with self._table.batch_writer() as batch:
            for name, team in state.teams.items():
                batch.put_item(
                    Item={
                        "PK": self.PARTITION_KEY,
                        "SK": f"TEAM#{name}",
                        "members": [{"name": m.display_name, "id": m.id} for m in team.members],
                        "current_tick": team.current_tick,
                    }
                )

        logger.debug("Roster saved", extra={"teams": list(state.teams)})
