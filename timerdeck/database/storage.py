"""Key/blob storage backed by the ``stored_values`` table.

This is the only thing the timer engine knows about the database:
``read(key)`` returns the last blob written under *key* (or ``None``),
``write(key, blob)`` replaces it and reports success as a bool.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from .db import get_session
from .models import StoredValue

log = logging.getLogger(__name__)

TIMERS_KEY = "timers"
HISTORY_KEY = "timer_history"


class SqlStorage:
    """Storage collaborator over SQLAlchemy."""

    def read(self, key: str) -> str | None:
        with get_session() as db:
            row = db.query(StoredValue).filter_by(key=key).one_or_none()
            return row.payload if row is not None else None

    def write(self, key: str, blob: str) -> bool:
        try:
            with get_session() as db:
                row = db.query(StoredValue).filter_by(key=key).one_or_none()
                if row is None:
                    db.add(StoredValue(key=key, payload=blob))
                else:
                    row.payload = blob
        except SQLAlchemyError:
            log.exception("Failed to write key %r", key)
            return False
        return True
