"""Tests for settings, logging setup and notifiers."""

from __future__ import annotations

import json
import logging

import pytest

from timerdeck.log import configure_logging, resolve_level, LOGGER_NAME
from timerdeck.notifications import LogNotifier, SignalNotifier
from timerdeck.settings import Settings, load_settings, save_settings

from helpers import SignalCollector


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_tick_interval(self):
        assert Settings().tick_interval_ms == 1000

    def test_notifications_on(self):
        assert Settings().notifications_enabled is True

    def test_default_database(self):
        assert Settings().database_url is None


class TestSettingsPersistence:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "settings.json"
        s = Settings(tick_interval_ms=250, notifications_enabled=False)
        save_settings(s, path)
        assert load_settings(path) == s

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"tick_interval_ms": 500, "theme": "dark"}))
        assert load_settings(path).tick_interval_ms == 500

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{oops")
        assert load_settings(path) == Settings()

    def test_save_creates_parent_dir(self, tmp_path):
        path = tmp_path / "deep" / "settings.json"
        save_settings(Settings(), path)
        assert json.loads(path.read_text())["log_level"] == "INFO"


# ═══════════════════════════════════════════════════════════════════════
#  LOGGING
# ═══════════════════════════════════════════════════════════════════════


class TestLogging:
    @pytest.fixture(autouse=True)
    def _clean_logger(self):
        logger = logging.getLogger(LOGGER_NAME)
        saved = list(logger.handlers)
        level = logger.level
        yield
        for h in logger.handlers:
            if h not in saved:
                h.close()
        logger.handlers = saved
        logger.setLevel(level)

    def test_file_handler_writes(self, tmp_path):
        logger = configure_logging(logging.DEBUG, log_dir=tmp_path, console=False)
        logging.getLogger("timerdeck.timer.store").info("hello from store")
        for h in logger.handlers:
            h.flush()
        assert "hello from store" in (tmp_path / "timerdeck.log").read_text()

    def test_idempotent(self, tmp_path):
        configure_logging(log_dir=tmp_path, console=True)
        count = len(logging.getLogger(LOGGER_NAME).handlers)
        configure_logging(log_dir=tmp_path, console=True)
        assert len(logging.getLogger(LOGGER_NAME).handlers) == count

    def test_accepts_level_name(self):
        logger = configure_logging("WARNING", console=False)
        assert logger.level == logging.WARNING

    def test_lowercase_level_name(self):
        assert configure_logging("debug", console=False).level == logging.DEBUG

    @pytest.mark.parametrize("name", ["LOUD", "", "Level 7"])
    def test_unknown_level_falls_back_to_info(self, name):
        assert configure_logging(name, console=False).level == logging.INFO

    def test_resolve_level(self):
        assert resolve_level(logging.ERROR) == logging.ERROR
        assert resolve_level(" warning ") == logging.WARNING
        assert resolve_level("verbose") == logging.INFO


# ═══════════════════════════════════════════════════════════════════════
#  NOTIFIERS
# ═══════════════════════════════════════════════════════════════════════


class TestNotifiers:
    def test_log_notifier(self, caplog):
        with caplog.at_level(logging.INFO, logger="timerdeck.notifications"):
            LogNotifier().notify("Halfway Point!", "Tea is halfway complete!")
        assert "Tea is halfway complete!" in caplog.text

    def test_signal_notifier_emits(self, qapp):
        n = SignalNotifier()
        c = SignalCollector()
        n.notified.connect(c)
        n.notify("Title", "Body")
        assert c.last == ("Title", "Body")

