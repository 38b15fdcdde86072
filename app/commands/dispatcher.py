from collections.abc import Callable

from aws_lambda_powertools import Logger

from notifier import Notifier
from roster.engine import Direction
from roster.errors import AmbiguousOrUnknownCommand, RosterError, UserRefNotResolved
from roster.models import Member
from roster.service import RosterService
from scheduler.scheduler import AnnouncementScheduler

from . import messages
from .interpreter import Action, Command, CommandInterpreter


logger = Logger(child=True)


class CommandDispatcher:
    def __init__(
        self,
        interpreter: CommandInterpreter,
        roster: RosterService,
        scheduler: AnnouncementScheduler,
        notifier: Notifier,
        display_name: Callable[[str], str | None],
        bot_name: str = "@SupportRoster",
    ):
        self._interpreter = interpreter
        self._roster = roster
        self._scheduler = scheduler
        self._notifier = notifier
        self._display_name = display_name
        self._bot_name = bot_name

        self._handlers: dict[Action, Callable[[Command, str], str]] = {
            Action.HELP: self._help,
            Action.SHOW_CURRENT_ROSTER: self._show_current,
            Action.SHOW_NEXT_ROSTER: self._show_next,
            Action.START: self._start,
            Action.PAUSE: self._pause,
            Action.RECALL: self._recall,
            Action.ADD: self._add,
            Action.REMOVE: self._remove,
            Action.SKIP: self._skip,
            Action.BACK: self._back,
        }

    def handle_mention(self, text: str, channel: str) -> str:
        """Run one command and post the reply. Normal input never raises."""
        action = None
        try:
            command = self._interpreter.interpret(text)
            action = command.action.value
            logger.info("Handling command", extra={"action": action, "team": command.team})
            reply = self.execute(command, channel)
        except RosterError as e:
            logger.info("Command rejected", extra={"error_type": type(e).__name__, "action": action})
            reply = str(e)
        except Exception:
            logger.exception("Command failed", extra={"action": action})
            reply = messages.INTERNAL_ERROR

        self._notifier.post(reply, channel)
        return reply

    def execute(self, command: Command, channel: str) -> str:
        handler = self._handlers.get(command.action)
        if handler is None:
            raise AmbiguousOrUnknownCommand(self._bot_name)
        return handler(command, channel)

    def announce(self, channel: str) -> str:
        """Weekly announcement: names each team's assignee, then advances every tick."""
        text = messages.announcement_text(self._roster.rotate_all())
        self._notifier.post(text, channel)
        return text

    def _help(self, command: Command, channel: str) -> str:
        return messages.help_text(self._bot_name, self._roster.registry.teams)

    def _show_current(self, command: Command, channel: str) -> str:
        return self._list(command, upcoming=False)

    def _show_next(self, command: Command, channel: str) -> str:
        return self._list(command, upcoming=True)

    def _list(self, command: Command, upcoming: bool) -> str:
        teams = self._roster.registry.expand(command.team)
        return messages.roster_text(self._roster.snapshot(), teams, upcoming=upcoming)

    def _start(self, command: Command, channel: str) -> str:
        until_first = self._scheduler.start(lambda: self.announce(channel))
        return messages.started_text(until_first)

    def _pause(self, command: Command, channel: str) -> str:
        self._scheduler.pause()
        return messages.paused_text(self._bot_name)

    def _recall(self, command: Command, channel: str) -> str:
        return messages.announcement_text(self._roster.this_week())

    def _add(self, command: Command, channel: str) -> str:
        team = self._roster.registry.resolve(command.team)
        user_id = self._require_user(command)
        name = self._display_name(user_id)
        if not name:
            logger.warning("Display name unavailable, using user id", extra={"user_id": user_id})
            name = user_id

        member = self._roster.add_member(team, Member(display_name=name, id=user_id))
        return messages.added_text(member, team)

    def _remove(self, command: Command, channel: str) -> str:
        team = self._roster.registry.resolve(command.team)
        user_id = self._require_user(command)
        member, reset = self._roster.remove_member(team, user_id)
        return messages.removed_text(member, team, reset)

    def _skip(self, command: Command, channel: str) -> str:
        return self._move(command, Direction.FORWARD)

    def _back(self, command: Command, channel: str) -> str:
        return self._move(command, Direction.BACK)

    def _move(self, command: Command, direction: Direction) -> str:
        upcoming = self._roster.advance(command.team, direction)
        return messages.moved_text(command.team, direction == Direction.FORWARD, upcoming)

    @staticmethod
    def _require_user(command: Command) -> str:
        if not command.user_ref:
            raise UserRefNotResolved(command.user_token)
        return command.user_ref
