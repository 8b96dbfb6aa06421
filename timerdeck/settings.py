"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/TimerDeck/settings.json

Usage::

    settings = load_settings()
    settings.tick_interval_ms = 500
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

log = logging.getLogger(__name__)

# Shared with database/db.py
APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "TimerDeck"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"
LOG_DIR = APP_SUPPORT_DIR / "logs"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── engine ────────────────────────────────────────────────────────
    tick_interval_ms: int = 1000           # one tick == one second of duration

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True

    # ── storage ───────────────────────────────────────────────────────
    database_url: str | None = None        # None -> SQLite file in APP_SUPPORT_DIR

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_to_console: bool = True


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Could not read settings from %s, using defaults: %s", path, exc)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
