"""Database package."""

from .db import configure_engine, get_session, init_db
from .models import StoredValue
from .storage import SqlStorage, TIMERS_KEY, HISTORY_KEY

__all__ = [
    "configure_engine",
    "get_session",
    "init_db",
    "StoredValue",
    "SqlStorage",
    "TIMERS_KEY",
    "HISTORY_KEY",
]
