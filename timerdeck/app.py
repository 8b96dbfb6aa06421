"""TimerDeckApp — wires the engine together.

Storage → write queue → store / history → dispatchers → scheduler.
A front end talks to ``actions`` and ``store`` and listens to the
store's and scheduler's signals; nothing else needs to be touched.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject

from .database.db import configure_engine, init_db
from .database.storage import SqlStorage
from .history import HistoryRecorder
from .notifications import LogNotifier, Notifier
from .persistence import PersistenceWriter, Storage
from .settings import Settings
from .timer.dispatcher import ActionDispatcher, EventDispatcher
from .timer.models import Timer
from .timer.scheduler import TickScheduler
from .timer.store import TimerStore

log = logging.getLogger(__name__)


class TimerDeckApp(QObject):
    """Composition root for a running engine."""

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QObject | None = None,
        *,
        storage: Storage | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings or Settings()

        if storage is None:
            if self.settings.database_url:
                configure_engine(self.settings.database_url)
            init_db()
            storage = SqlStorage()

        self.notifier: Notifier = notifier or LogNotifier()
        self.writer = PersistenceWriter(storage)
        self.store = TimerStore(self.writer, parent=self)
        self.history = HistoryRecorder(self.writer)
        self.events = EventDispatcher(_Gate(self.notifier, self.settings), self.history)
        self.actions = ActionDispatcher(self.store)
        self.scheduler = TickScheduler(
            self.store,
            self.events,
            parent=self,
            interval_ms=self.settings.tick_interval_ms,
        )

    # ── lifecycle ─────────────────────────────────────────────────────

    def start(self) -> None:
        """Load the saved timers and begin ticking.

        Timers saved as running resume from their stored remaining
        time; time spent while the process was not running is lost.
        """
        self.store.load()
        self.scheduler.start()

    def shutdown(self, timeout: float | None = 5.0) -> None:
        self.scheduler.stop()
        if not self.writer.flush(timeout):
            log.warning("Pending writes did not finish within %ss", timeout)
        self.writer.shutdown()

    # ── convenience ───────────────────────────────────────────────────

    def create_timer(
        self,
        name: str,
        category: str,
        duration: int | str,
        halfway_alert: bool = False,
    ) -> Timer:
        return self.store.create(name, category, duration, halfway_alert)


class _Gate:
    """Drops alerts while notifications are disabled in settings."""

    def __init__(self, notifier: Notifier, settings: Settings) -> None:
        self._notifier = notifier
        self._settings = settings

    def notify(self, title: str, message: str) -> None:
        if self._settings.notifications_enabled:
            self._notifier.notify(title, message)
