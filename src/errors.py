class StandupError(Exception):
    """Base class for errors raised by the standup bot"""


class ValidationError(StandupError):
    """Malformed user input. `code` names the translation template used to report it."""

    def __init__(self, code, value=""):
        super().__init__(f"{code}: {value}" if value else code)
        self.code = code
        self.value = value

    def render(self, translation):
        return getattr(translation, self.code).format(value=self.value)


class NotFoundError(StandupError):
    """A user, channel, member or timetable does not exist"""


class StoreError(StandupError):
    """The store failed for a reason other than a missing record"""


class MessengerError(StandupError):
    """A chat message could not be delivered"""
