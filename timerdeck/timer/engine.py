"""Pure state transitions for the timer engine.

Nothing in here touches Qt, storage, or the clock.  Every function takes
a snapshot (a tuple of :class:`Timer`) and returns a new one; callers
commit the result through the store.

Action table
------------
start   status := running                 (any state, even completed)
pause   status := paused                  (any state)
reset   remaining := duration, status := idle, halfway latch cleared

Tick
----
For each running timer, one second comes off ``remaining_time``.
Reaching zero completes the timer; otherwise the first crossing of
``duration / 2`` fires the halfway alert (when enabled).  Completion
wins if both would apply on the same tick.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import (
    Timer,
    TimerAction,
    TimerStatus,
    TimerEvent,
    HalfwayReached,
    TimerCompleted,
)

Snapshot = tuple[Timer, ...]


# ── tick ──────────────────────────────────────────────────────────────────


def advance_timer(timer: Timer) -> tuple[Timer, TimerEvent | None]:
    """Advance a single timer by one tick."""
    if timer.status != TimerStatus.RUNNING:
        return timer, None

    new_remaining = timer.remaining_time - 1

    if new_remaining <= 0:
        done = timer.evolve(remaining_time=0, status=TimerStatus.COMPLETED)
        return done, TimerCompleted(done)

    # True division: a 9 s timer's half-point is 4.5, crossed at 4.
    if (
        timer.halfway_alert
        and not timer.halfway_alert_triggered
        and new_remaining <= timer.duration / 2
    ):
        halfway = timer.evolve(
            remaining_time=new_remaining,
            halfway_alert_triggered=True,
        )
        return halfway, HalfwayReached(halfway)

    return timer.evolve(remaining_time=new_remaining), None


def advance(timers: Iterable[Timer]) -> tuple[Snapshot, list[TimerEvent]]:
    """Advance every running timer by one tick.

    Returns the whole new snapshot (non-running timers passed through
    untouched) and the events produced, in snapshot order.
    """
    new_timers: list[Timer] = []
    events: list[TimerEvent] = []
    for timer in timers:
        new_timer, event = advance_timer(timer)
        new_timers.append(new_timer)
        if event is not None:
            events.append(event)
    return tuple(new_timers), events


# ── actions ───────────────────────────────────────────────────────────────


def coerce_action(action: TimerAction | str) -> TimerAction:
    if isinstance(action, TimerAction):
        return action
    try:
        return TimerAction(action)
    except ValueError:
        raise ValueError(f"Unknown timer action: {action!r}") from None


def apply_action(timer: Timer, action: TimerAction | str) -> Timer:
    """Apply one row of the action table to *timer*."""
    action = coerce_action(action)
    if action == TimerAction.START:
        return timer.evolve(status=TimerStatus.RUNNING)
    if action == TimerAction.PAUSE:
        return timer.evolve(status=TimerStatus.PAUSED)
    return timer.evolve(
        remaining_time=timer.duration,
        status=TimerStatus.IDLE,
        halfway_alert_triggered=False,
    )


def apply_to_timer(
    timers: Iterable[Timer], timer_id: str, action: TimerAction | str
) -> Snapshot:
    action = coerce_action(action)
    return tuple(
        apply_action(t, action) if t.id == timer_id else t for t in timers
    )


def apply_to_category(
    timers: Iterable[Timer], category: str, action: TimerAction | str
) -> Snapshot:
    """Map the action table over every timer whose category is *category*.

    Timers in other categories come back as the very same objects.
    """
    action = coerce_action(action)
    return tuple(
        apply_action(t, action) if t.category == category else t for t in timers
    )
