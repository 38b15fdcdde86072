import threading
from collections.abc import Iterator
from contextlib import contextmanager

from aws_lambda_powertools import Logger

from . import engine
from .engine import Direction
from .models import Assignment, Member, RosterState
from .store import RosterStore
from .teams import TeamRegistry


logger = Logger(child=True)


class RosterService:
    """
    Load-mutate-save around the rotation engine.

    The store reads and writes the whole roster at once, so one lock covers every
    team. Commands and scheduled announcements both go through here.
    """

    def __init__(self, store: RosterStore, registry: TeamRegistry):
        self._store = store
        self._registry = registry
        self._lock = threading.RLock()

    @property
    def registry(self) -> TeamRegistry:
        return self._registry

    @contextmanager
    def _transaction(self) -> Iterator[RosterState]:
        with self._lock:
            state = self._store.load()
            yield state
            self._store.save(state)

    def snapshot(self) -> RosterState:
        with self._lock:
            return self._store.load()

    def add_member(self, team: str, member: Member) -> Member:
        team = self._registry.resolve(team)
        with self._transaction() as state:
            engine.add_member(state, team, member)

        logger.info("Member added", extra={"team": team, "member_id": member.id})
        return member

    def remove_member(self, team: str, member_id: str) -> tuple[Member, bool]:
        """Returns the removed member and whether the queue position was reset."""
        team = self._registry.resolve(team)
        with self._transaction() as state:
            pointed = engine.current_assignee(state, team)
            removed = engine.remove_member(state, team, member_id)

        reset = pointed is not None and pointed.id == member_id
        logger.info("Member removed", extra={"team": team, "member_id": member_id, "tick_reset": reset})
        return removed, reset

    def advance(self, team: str, direction: Direction) -> Member | None:
        """Move the team's tick and return the member now next in line."""
        team = self._registry.resolve(team)
        with self._transaction() as state:
            tick = engine.advance_tick(state, team, direction)
            upcoming = engine.current_assignee(state, team)

        logger.info("Tick moved", extra={"team": team, "direction": direction.value, "tick": tick})
        return upcoming

    def rotate_all(self) -> list[Assignment]:
        with self._transaction() as state:
            assignments = engine.rotate(state, list(self._registry.teams))

        logger.info("Weekly rotation applied", extra={"teams": list(self._registry.teams)})
        return assignments

    def this_week(self) -> list[Assignment]:
        state = self.snapshot()
        return [Assignment(team, engine.previous_assignee(state, team)) for team in self._registry.teams]
