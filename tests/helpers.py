"""Shared test helpers for TimerDeck."""

from datetime import datetime, timezone

from timerdeck.timer.models import Timer, TimerStatus

FIXED_NOW = datetime(2026, 3, 14, 15, 9, 26, tzinfo=timezone.utc)


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None


class RecordingNotifier:
    """Notifier that keeps every (title, message) it was asked to show."""

    def __init__(self, fail: bool = False):
        self.sent: list[tuple[str, str]] = []
        self.fail = fail

    def notify(self, title, message):
        if self.fail:
            raise RuntimeError("notification backend unavailable")
        self.sent.append((title, message))

    @property
    def titles(self):
        return [title for title, _ in self.sent]


class MemoryStorage:
    """Dict-backed Storage; ``fail_writes`` makes every write report failure."""

    def __init__(self, fail_writes: bool = False):
        self.data: dict[str, str] = {}
        self.writes: list[tuple[str, str]] = []
        self.fail_writes = fail_writes

    def read(self, key):
        return self.data.get(key)

    def write(self, key, blob):
        if self.fail_writes:
            return False
        self.data[key] = blob
        self.writes.append((key, blob))
        return True


def make_timer(
    id="t1",
    name="Tea",
    category="Kitchen",
    duration=10,
    remaining_time=None,
    status=TimerStatus.IDLE,
    halfway_alert=False,
    halfway_alert_triggered=False,
) -> Timer:
    return Timer(
        id=id,
        name=name,
        category=category,
        duration=duration,
        remaining_time=duration if remaining_time is None else remaining_time,
        status=status,
        halfway_alert=halfway_alert,
        halfway_alert_triggered=halfway_alert_triggered,
    )


def run_ticks(scheduler, n: int) -> list:
    """Call ``tick()`` *n* times and return every event produced."""
    events = []
    for _ in range(n):
        events.extend(scheduler.tick())
    return events
