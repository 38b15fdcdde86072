from collections.abc import Iterable


class RosterError(Exception):
    """Recoverable failure reported back to whoever issued the command."""


class InvalidTeam(RosterError):
    def __init__(self, team: str | None, valid: Iterable[str] = ()):
        self.team = team
        self.valid = tuple(valid)

        if team:
            message = f"{team.upper()} is not a valid team, please try again."
        else:
            message = "Please include a team, e.g. `skip cr`."
        if self.valid:
            message += f" Valid teams: {', '.join(self.valid)}."

        super().__init__(message)


class AmbiguousOrUnknownCommand(RosterError):
    def __init__(self, bot_name: str = "@SupportRoster"):
        super().__init__(f"Sorry, I didn't understand that command.\nType `{bot_name} help` to learn more.")


class UserRefNotResolved(RosterError):
    def __init__(self, token: str | None = None):
        self.token = token
        super().__init__("Sorry I couldn't match that user, please try again.")


class MemberNotFound(RosterError):
    def __init__(self, member: str, team: str):
        self.member = member
        self.team = team
        super().__init__(f"{member} wasn't found in the {team.upper()} team!")


class MemberAlreadyPresent(RosterError):
    def __init__(self, member: str, team: str):
        self.member = member
        self.team = team
        super().__init__(f"{member} is already a part of the {team.upper()} team!")
