"""Shared pytest fixtures for TimerDeck tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from timerdeck.database.db import configure_engine, init_db
from timerdeck.database.storage import SqlStorage
from timerdeck.history import HistoryRecorder
from timerdeck.persistence import PersistenceWriter
from timerdeck.timer.dispatcher import ActionDispatcher, EventDispatcher
from timerdeck.timer.scheduler import TickScheduler
from timerdeck.timer.store import TimerStore

from helpers import RecordingNotifier, FIXED_NOW


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def storage():
    return SqlStorage()


@pytest.fixture
def writer(storage):
    w = PersistenceWriter(storage)
    yield w
    w.flush(timeout=5)
    w.shutdown()


@pytest.fixture
def store(qapp, writer):
    return TimerStore(writer)


@pytest.fixture
def history(writer):
    return HistoryRecorder(writer)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def events(notifier, history):
    return EventDispatcher(notifier, history, clock=lambda: FIXED_NOW)


@pytest.fixture
def actions(store):
    return ActionDispatcher(store)


@pytest.fixture
def scheduler(qapp, store, events):
    s = TickScheduler(store, events)
    yield s
    s.stop()
