"""Completion history.

Every timer that runs to zero gets one :class:`HistoryEntry` appended to
the ``timer_history`` list.  The whole list is rewritten on each append,
on the same write queue as the timer snapshot, so recording never
blocks a tick and entries land in completion order.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime

from .database.storage import HISTORY_KEY
from .errors import PersistenceError
from .persistence import PersistenceWriter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    timer_id: str
    name: str
    category: str
    completed_at: datetime

    def to_dict(self) -> dict:
        return {
            "timer_id": self.timer_id,
            "name": self.name,
            "category": self.category,
            "completed_at": self.completed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> HistoryEntry:
        return cls(
            timer_id=str(data["timer_id"]),
            name=data["name"],
            category=data["category"],
            completed_at=datetime.fromisoformat(data["completed_at"]),
        )


class HistoryRecorder:
    """Append-only log of completed timers."""

    def __init__(self, writer: PersistenceWriter) -> None:
        self._writer = writer

    def record_completion(
        self,
        timer_id: str,
        name: str,
        category: str,
        completed_at: datetime,
    ) -> Future:
        """Queue an append and return immediately."""
        entry = HistoryEntry(timer_id, name, category, completed_at)
        return self._writer.submit(self._append, entry)

    def entries(self) -> list[HistoryEntry]:
        """All entries in the order they were recorded."""
        return self._read()

    def recent(self) -> list[HistoryEntry]:
        """Newest first."""
        return sorted(self._read(), key=lambda e: e.completed_at, reverse=True)

    # ── internals ─────────────────────────────────────────────────────

    def _read_raw(self) -> list:
        blob = self._writer.storage.read(HISTORY_KEY)
        if not blob:
            return []
        data = json.loads(blob)
        if not isinstance(data, list):
            raise PersistenceError("history must be a JSON array")
        return data

    def _read(self) -> list[HistoryEntry]:
        """Parse stored history, skipping anything unreadable."""
        try:
            items = self._read_raw()
        except (ValueError, PersistenceError) as exc:
            log.error("%s", PersistenceError(f"could not read history: {exc}"))
            return []

        entries = []
        for index, item in enumerate(items):
            try:
                entries.append(HistoryEntry.from_dict(item))
            except (KeyError, ValueError, TypeError) as exc:
                log.warning("Skipping unreadable history record %d: %r", index, exc)
        return entries

    def _append(self, entry: HistoryEntry) -> None:
        try:
            items = self._read_raw()
        except (ValueError, PersistenceError) as exc:
            log.error("History is corrupt, starting a new list: %s", exc)
            items = []
        items.append(entry.to_dict())
        if not self._writer.storage.write(HISTORY_KEY, json.dumps(items)):
            raise PersistenceError(f"could not record completion of {entry.name!r}")
        log.info("Recorded completion of %r (%s)", entry.name, entry.category)
