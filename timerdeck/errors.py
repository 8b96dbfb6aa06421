"""Exception types for TimerDeck.

Only :class:`ValidationError` is ever raised to a caller of the public
API.  Persistence and notification failures are logged where they
happen and never interrupt a tick or an action.
"""


class TimerDeckError(Exception):
    """Base class for every TimerDeck error."""


class ValidationError(TimerDeckError, ValueError):
    """Bad user input when creating a timer."""


class PersistenceError(TimerDeckError):
    """Storage read/write failure."""


class NotificationError(TimerDeckError):
    """An alert or history delivery failed."""
