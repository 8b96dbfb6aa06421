"""Alert delivery.

The engine only decides *when* to alert; a notifier decides *how*.
Anything with ``notify(title, message)`` will do.
"""

from __future__ import annotations

import logging
from typing import Protocol

from PyQt6.QtCore import QObject, pyqtSignal

log = logging.getLogger(__name__)

HALFWAY_TITLE = "Halfway Point!"
COMPLETE_TITLE = "Timer Complete! \U0001F389"


def halfway_message(name: str) -> str:
    return f"{name} is halfway complete!"


def complete_message(name: str) -> str:
    return f"{name} has finished!"


class Notifier(Protocol):
    def notify(self, title: str, message: str) -> None: ...


class LogNotifier:
    """Writes alerts to the log.  Used when running headless."""

    def notify(self, title: str, message: str) -> None:
        log.info("ALERT %s %s", title, message)


class SignalNotifier(QObject):
    """Re-emits alerts as a Qt signal for a front end to display.

    Signals
    -------
    notified(title: str, message: str)
    """

    notified = pyqtSignal(str, str)

    def notify(self, title: str, message: str) -> None:
        self.notified.emit(title, message)
