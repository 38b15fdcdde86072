from .dispatcher import CommandDispatcher
from .interpreter import Action, Command, CommandInterpreter, KeywordSet
from .mentions import slack_user_ref


__all__ = [
    "Action",
    "Command",
    "CommandDispatcher",
    "CommandInterpreter",
    "KeywordSet",
    "slack_user_ref",
]
