"""TickScheduler — the periodic driver.

A ``QTimer`` fires once per interval; each firing is one tick.  The
tick itself is a single store commit of :func:`engine.advance`, so an
action dispatched between two ticks sees either the old snapshot or the
new one, never a mix.

Signals
-------
ticked(timers: tuple)
    Emitted after every tick with the new snapshot.
halfway_reached(timer: Timer)
    Emitted once per run cycle when an alert-enabled timer crosses half.
timer_completed(timer: Timer)
    Emitted at the tick a running timer reaches zero.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .dispatcher import EventDispatcher
from .engine import advance
from .models import HalfwayReached, TimerCompleted, TimerEvent
from .store import TimerStore

log = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickScheduler(QObject):

    ticked = pyqtSignal(object)
    halfway_reached = pyqtSignal(object)
    timer_completed = pyqtSignal(object)

    def __init__(
        self,
        store: TimerStore,
        events: EventDispatcher,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._events = events

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self.tick)

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def start(self) -> None:
        if not self._qt_timer.isActive():
            self._qt_timer.start()
            log.debug("Tick scheduler started (%d ms)", self._qt_timer.interval())

    def stop(self) -> None:
        """Cancel the periodic driver.  A tick is never left half-applied."""
        if self._qt_timer.isActive():
            self._qt_timer.stop()
            log.debug("Tick scheduler stopped")

    def tick(self) -> list[TimerEvent]:
        """Advance every running timer by one second."""
        events = self._store.commit(advance)
        self.ticked.emit(self._store.snapshot())

        for event in events:
            if isinstance(event, TimerCompleted):
                log.info("Timer %r completed", event.timer.name)
                self.timer_completed.emit(event.timer)
            elif isinstance(event, HalfwayReached):
                log.info("Timer %r is halfway", event.timer.name)
                self.halfway_reached.emit(event.timer)

        self._events.dispatch(events)
        return events
