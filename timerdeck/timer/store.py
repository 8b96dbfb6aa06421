"""TimerStore — the single owner of the timer snapshot.

Readers get an immutable tuple.  Writers (the tick scheduler and the
action dispatcher) go through :meth:`TimerStore.commit`, which reads the
current snapshot, computes the next one, and swaps it in under one lock.
Every commit queues exactly one serialized write of the whole list.

Signals
-------
snapshot_changed(timers: tuple)
    Emitted after every commit with the new snapshot.
"""

from __future__ import annotations

import json
import logging
import re
import threading
import uuid
from collections.abc import Iterable
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from ..database.storage import TIMERS_KEY
from ..errors import PersistenceError, ValidationError
from ..persistence import PersistenceWriter
from .models import Timer, TimerStatus, TimerEvent

log = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Snapshot = tuple[Timer, ...]
Step = Callable[[Snapshot], tuple[Iterable[Timer], list[TimerEvent]]]


# ── validation ───────────────────────────────────────────────────────────


def _require_label(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Timer {field} is required")
    return value.strip()


def parse_duration(value) -> int:
    """Accept a positive int or a string of digits (``"30"``)."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("Timer duration is required")
    if isinstance(value, int):
        seconds = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"Duration must be a whole number of seconds, got {value}")
        seconds = int(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValidationError("Timer duration is required")
        if not _INTEGER_RE.fullmatch(text):
            raise ValidationError(f"Duration must be a number, got {value!r}")
        seconds = int(text)
    else:
        raise ValidationError(f"Duration must be a number, got {value!r}")
    if seconds <= 0:
        raise ValidationError(f"Duration must be greater than zero, got {seconds}")
    return seconds


# ── store ────────────────────────────────────────────────────────────────


class TimerStore(QObject):
    """Owns the ordered timer collection and its persistence."""

    snapshot_changed = pyqtSignal(object)

    def __init__(
        self,
        writer: PersistenceWriter,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._writer = writer
        self._timers: Snapshot = ()
        self._version = 0
        self._lock = threading.RLock()

    # ── reads ─────────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        return self._timers

    def get(self, timer_id: str) -> Timer:
        for timer in self._timers:
            if timer.id == timer_id:
                return timer
        raise KeyError(timer_id)

    @property
    def version(self) -> int:
        """Bumped on every commit."""
        return self._version

    def __len__(self) -> int:
        return len(self._timers)

    # ── writes ────────────────────────────────────────────────────────

    def create(
        self,
        name: str,
        category: str,
        duration: int | str,
        halfway_alert: bool = False,
    ) -> Timer:
        """Validate, append a new idle timer, persist.

        Raises :class:`ValidationError` without touching the snapshot if
        any field is missing or invalid.
        """
        name = _require_label(name, "name")
        category = _require_label(category, "category")
        seconds = parse_duration(duration)

        timer = Timer(
            id=uuid.uuid4().hex,
            name=name,
            category=category,
            duration=seconds,
            remaining_time=seconds,
            status=TimerStatus.IDLE,
            halfway_alert=bool(halfway_alert),
        )
        self.commit(lambda timers: (timers + (timer,), []))
        log.info("Created timer %r in %r (%ds)", name, category, seconds)
        return timer

    def replace_all(self, timers: Iterable[Timer]) -> None:
        new_timers = tuple(timers)
        self.commit(lambda _: (new_timers, []))

    def commit(self, step: Step) -> list[TimerEvent]:
        """Run one atomic read/compute/replace step and persist once.

        *step* receives the current snapshot and returns the new
        snapshot plus any events to emit; the events are returned.
        """
        with self._lock:
            new_timers, events = step(self._timers)
            self._timers = tuple(new_timers)
            self._version += 1
            snapshot = self._timers
            self._persist(snapshot)
        self.snapshot_changed.emit(snapshot)
        return list(events)

    # ── persistence ───────────────────────────────────────────────────

    def load(self) -> Snapshot:
        """Replace the in-memory snapshot with the stored one.

        A missing key means a first run; an unreadable blob is logged
        and the store starts empty.  Unreadable records are skipped and
        the rest are kept.  Loading does not write back.
        """
        try:
            blob = self._writer.storage.read(TIMERS_KEY)
            timers = self.deserialize(blob) if blob else ()
        except Exception as exc:
            err = PersistenceError(f"could not load timers: {exc}")
            log.error("%s", err)
            timers = ()
        with self._lock:
            self._timers = timers
            self._version += 1
        self.snapshot_changed.emit(timers)
        log.info("Loaded %d timer(s)", len(timers))
        return timers

    @staticmethod
    def serialize(timers: Iterable[Timer]) -> str:
        return json.dumps([t.to_dict() for t in timers])

    @staticmethod
    def deserialize(blob: str) -> Snapshot:
        data = json.loads(blob)
        if not isinstance(data, list):
            raise ValueError("timer list must be a JSON array")
        timers = []
        for index, item in enumerate(data):
            try:
                timers.append(Timer.from_dict(item))
            except (KeyError, ValueError, TypeError) as exc:
                log.warning("Skipping unreadable timer record %d: %r", index, exc)
        return tuple(timers)

    def _persist(self, timers: Snapshot) -> None:
        try:
            self._writer.submit_write(TIMERS_KEY, self.serialize(timers))
        except RuntimeError as exc:
            # Executor already shut down; the snapshot stays in memory.
            log.error("%s", PersistenceError(f"could not queue timer write: {exc}"))
