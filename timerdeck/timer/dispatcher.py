"""Action and event dispatch.

``ActionDispatcher`` turns a user request (start/pause/reset on one
timer or a whole category) into a single store commit.

``EventDispatcher`` delivers what a commit produced: halfway alerts to
the notifier, completions to the history recorder and the notifier.
Each delivery is isolated so a failing notifier cannot stop the next
event from going out.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Callable

from ..errors import NotificationError
from ..history import HistoryRecorder
from ..notifications import (
    Notifier,
    HALFWAY_TITLE,
    COMPLETE_TITLE,
    halfway_message,
    complete_message,
)
from .engine import apply_to_category, apply_to_timer, coerce_action
from .models import TimerAction, TimerEvent, HalfwayReached, TimerCompleted
from .store import Snapshot, TimerStore

log = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


class EventDispatcher:
    """Sends engine events to the outside world, best effort."""

    def __init__(
        self,
        notifier: Notifier,
        history: HistoryRecorder,
        clock: Callable[[], datetime] = _now,
    ) -> None:
        self._notifier = notifier
        self._history = history
        self._clock = clock

    def dispatch(self, events: Iterable[TimerEvent]) -> None:
        for event in events:
            if isinstance(event, TimerCompleted):
                self._record(event)
                self._notify(COMPLETE_TITLE, complete_message(event.timer.name))
            elif isinstance(event, HalfwayReached):
                self._notify(HALFWAY_TITLE, halfway_message(event.timer.name))

    def _record(self, event: TimerCompleted) -> None:
        timer = event.timer
        try:
            self._history.record_completion(
                timer.id, timer.name, timer.category, self._clock()
            )
        except Exception as exc:
            log.error("%s", NotificationError(f"history append for {timer.name!r} failed: {exc}"))

    def _notify(self, title: str, message: str) -> None:
        try:
            self._notifier.notify(title, message)
        except Exception as exc:
            log.warning("%s", NotificationError(f"alert {title!r} not delivered: {exc}"))


class ActionDispatcher:
    """Applies start/pause/reset to one timer or a whole category."""

    def __init__(self, store: TimerStore) -> None:
        self._store = store

    # ── single timer ──────────────────────────────────────────────────

    def start(self, timer_id: str) -> Snapshot:
        return self.dispatch(TimerAction.START, timer_id=timer_id)

    def pause(self, timer_id: str) -> Snapshot:
        return self.dispatch(TimerAction.PAUSE, timer_id=timer_id)

    def reset(self, timer_id: str) -> Snapshot:
        return self.dispatch(TimerAction.RESET, timer_id=timer_id)

    # ── category ──────────────────────────────────────────────────────

    def start_category(self, category: str) -> Snapshot:
        return self.dispatch(TimerAction.START, category=category)

    def pause_category(self, category: str) -> Snapshot:
        return self.dispatch(TimerAction.PAUSE, category=category)

    def reset_category(self, category: str) -> Snapshot:
        return self.dispatch(TimerAction.RESET, category=category)

    # ── generic ───────────────────────────────────────────────────────

    def dispatch(
        self,
        action: TimerAction | str,
        *,
        timer_id: str | None = None,
        category: str | None = None,
    ) -> Snapshot:
        """Apply *action* to exactly one of *timer_id* or *category*.

        Raises ``KeyError`` for an unknown timer id.  A category with no
        timers matches nothing and the snapshot is unchanged.
        """
        action = coerce_action(action)
        if (timer_id is None) == (category is None):
            raise TypeError("pass exactly one of timer_id or category")

        if timer_id is not None:
            def step(timers: Snapshot):
                if not any(t.id == timer_id for t in timers):
                    raise KeyError(timer_id)
                return apply_to_timer(timers, timer_id, action), []
            target = f"timer {timer_id}"
        else:
            def step(timers: Snapshot):
                return apply_to_category(timers, category, action), []
            target = f"category {category!r}"

        self._store.commit(step)
        log.debug("Applied %s to %s", action.value, target)
        return self._store.snapshot()
