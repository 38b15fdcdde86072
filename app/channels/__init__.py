from .base import BaseChannel
from .slack import SlackChannel, SlackUserDirectory


__all__ = [
    "BaseChannel",
    "SlackChannel",
    "SlackUserDirectory",
]
