"""Timer package."""

from .models import (
    Timer,
    TimerStatus,
    TimerAction,
    HalfwayReached,
    TimerCompleted,
    format_time,
)
from .engine import advance, apply_action, apply_to_timer, apply_to_category
from .categories import group_by_category, category_names, timers_in
from .store import TimerStore, parse_duration
from .dispatcher import ActionDispatcher, EventDispatcher
from .scheduler import TickScheduler, TICK_INTERVAL_MS

__all__ = [
    "Timer",
    "TimerStatus",
    "TimerAction",
    "HalfwayReached",
    "TimerCompleted",
    "format_time",
    "advance",
    "apply_action",
    "apply_to_timer",
    "apply_to_category",
    "group_by_category",
    "category_names",
    "timers_in",
    "TimerStore",
    "parse_duration",
    "ActionDispatcher",
    "EventDispatcher",
    "TickScheduler",
    "TICK_INTERVAL_MS",
]
