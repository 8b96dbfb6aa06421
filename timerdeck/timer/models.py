"""Value types for the timer engine.

A :class:`Timer` is immutable.  Every change produces a new instance via
``dataclasses.replace`` so a snapshot handed to a reader never changes
underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


# ── enums ─────────────────────────────────────────────────────────────────


class TimerStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class TimerAction(Enum):
    START = "start"
    PAUSE = "pause"
    RESET = "reset"


# ── timer ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Timer:
    """One countdown.

    ``duration`` and ``remaining_time`` are whole seconds.
    ``halfway_alert_triggered`` latches the first time the timer crosses
    half its duration and is only cleared by a reset.
    """

    id: str
    name: str
    category: str
    duration: int
    remaining_time: int
    status: TimerStatus = TimerStatus.IDLE
    halfway_alert: bool = False
    halfway_alert_triggered: bool = False

    @property
    def is_running(self) -> bool:
        return self.status == TimerStatus.RUNNING

    @property
    def elapsed(self) -> int:
        return self.duration - self.remaining_time

    @property
    def percent_remaining(self) -> float:
        """0.0 → 100.0, the fill of a draining progress bar."""
        if self.duration <= 0:
            return 0.0
        return max(0.0, min(100.0, self.remaining_time / self.duration * 100))

    def evolve(self, **changes) -> Timer:
        return replace(self, **changes)

    # ── serialization ─────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "duration": self.duration,
            "remaining_time": self.remaining_time,
            "status": self.status.value,
            "halfway_alert": self.halfway_alert,
            "halfway_alert_triggered": self.halfway_alert_triggered,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Timer:
        duration = int(data["duration"])
        if duration <= 0:
            raise ValueError(f"duration must be positive, got {duration}")
        remaining = int(data.get("remaining_time", duration))
        return cls(
            id=str(data["id"]),
            name=data["name"],
            category=data["category"],
            duration=duration,
            remaining_time=max(0, min(duration, remaining)),
            status=TimerStatus(data.get("status", TimerStatus.IDLE.value)),
            halfway_alert=bool(data.get("halfway_alert", False)),
            halfway_alert_triggered=bool(data.get("halfway_alert_triggered", False)),
        )


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class HalfwayReached:
    timer: Timer


@dataclass(frozen=True)
class TimerCompleted:
    timer: Timer


TimerEvent = HalfwayReached | TimerCompleted


def format_time(seconds: int) -> str:
    """``125`` → ``"2:05"``."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"
