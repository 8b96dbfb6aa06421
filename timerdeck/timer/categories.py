"""Category grouping, always derived from a snapshot.

Categories are never declared.  A category exists while at least one
timer references it, in the order its first timer was created.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Timer


def group_by_category(timers: Iterable[Timer]) -> dict[str, list[Timer]]:
    groups: dict[str, list[Timer]] = {}
    for timer in timers:
        groups.setdefault(timer.category, []).append(timer)
    return groups


def category_names(timers: Iterable[Timer]) -> list[str]:
    return list(group_by_category(timers))


def timers_in(timers: Iterable[Timer], category: str) -> list[Timer]:
    return [t for t in timers if t.category == category]
