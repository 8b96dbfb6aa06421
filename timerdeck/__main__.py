"""Allow running TimerDeck as a module: python -m timerdeck."""

import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication, QTimer

from .app import TimerDeckApp
from .log import configure_logging
from .settings import LOG_DIR, load_settings


def main() -> None:
    settings = load_settings()
    configure_logging(
        level=settings.log_level,
        log_dir=LOG_DIR,
        console=settings.log_to_console,
    )
    log = logging.getLogger("timerdeck")

    app = QCoreApplication(sys.argv)
    app.setApplicationName("TimerDeck")
    app.setOrganizationName("TimerDeck")

    deck = TimerDeckApp(settings)
    deck.start()
    app.aboutToQuit.connect(deck.shutdown)

    # Ctrl+C quits the Qt loop cleanly; the idle timer lets Python see the signal
    signal.signal(signal.SIGINT, lambda *_: app.quit())
    wake = QTimer()
    wake.timeout.connect(lambda: None)
    wake.start(250)

    log.info("TimerDeck ready with %d timer(s)", len(deck.store))
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
