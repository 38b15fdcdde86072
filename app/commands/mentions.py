import re
from collections.abc import Callable


MentionExtractor = Callable[[str], str | None]

SLACK_USER_REF = re.compile(r"^<@([A-Za-z0-9]+)(?:\|[^>]*)?>$")


def slack_user_ref(token: str) -> str | None:
    """`<@U123ABC>` or `<@U123ABC|name>` -> `U123ABC`."""
    match = SLACK_USER_REF.match(token or "")
    return match.group(1) if match else None
