from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

from roster.teams import TeamRegistry

from .mentions import MentionExtractor, slack_user_ref


T = TypeVar("T")


class Action(str, Enum):
    HELP = "help"
    SHOW_CURRENT_ROSTER = "showCurrentRoster"
    SHOW_NEXT_ROSTER = "showNextRoster"
    START = "start"
    PAUSE = "pause"
    RECALL = "recall"
    ADD = "add"
    REMOVE = "remove"
    SKIP = "skip"
    BACK = "back"
    UNKNOWN = "unknown"


DEFAULT_ACTION_KEYWORDS: dict[str, Action] = {a.value: a for a in Action if a is not Action.UNKNOWN}


class KeywordSet(Generic[T]):
    """
    Exact, case-sensitive keyword lookup for one category of tokens.

    A category matches only when the tokens name exactly one of its options.
    Two different options in the same input cancel each other out.
    """

    def __init__(self, options: Mapping[str, T]):
        self._options = dict(options)

    @property
    def keywords(self) -> tuple[str, ...]:
        return tuple(self._options)

    def match(self, tokens: Iterable[str]) -> T | None:
        found = {self._options[t] for t in tokens if t in self._options}
        if len(found) != 1:
            return None
        return found.pop()


class Command(BaseModel):
    action: Action
    team: str | None = None
    user_ref: str | None = None
    user_token: str | None = None


class CommandInterpreter:
    def __init__(
        self,
        registry: TeamRegistry,
        mention_extractor: MentionExtractor = slack_user_ref,
        aliases: Mapping[str, str] | None = None,
    ):
        keywords: dict[str, Action] = dict(DEFAULT_ACTION_KEYWORDS)
        for keyword, action in (aliases or {}).items():
            keywords[keyword] = Action(action)

        self._actions = KeywordSet(keywords)
        self._teams = KeywordSet({t: t for t in registry.selectors})
        self._extract_user_ref = mention_extractor

    @staticmethod
    def tokenize(text: str) -> list[str]:
        return (text or "").split()

    @property
    def action_keywords(self) -> tuple[str, ...]:
        return self._actions.keywords

    def derive_action(self, text: str) -> Action | None:
        return self._actions.match(self.tokenize(text))

    def derive_team(self, text: str) -> str | None:
        return self._teams.match(self.tokenize(text))

    def user_token(self, text: str) -> str | None:
        """The token right after the action keyword: `@bot add <@U123> cr` -> `<@U123>`."""
        tokens = self.tokenize(text)
        for i, token in enumerate(tokens[:-1]):
            if token in self._actions.keywords:
                return tokens[i + 1]
        return None

    def derive_user_ref(self, text: str) -> str | None:
        token = self.user_token(text)
        if token is None:
            return None
        return self._extract_user_ref(token)

    def interpret(self, text: str) -> Command:
        action = self.derive_action(text) or Action.UNKNOWN
        command = Command(action=action, team=self.derive_team(text))

        if action in (Action.ADD, Action.REMOVE):
            command.user_token = self.user_token(text)
            command.user_ref = self.derive_user_ref(text)

        return command
