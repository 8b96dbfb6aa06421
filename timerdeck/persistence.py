"""Ordered, non-blocking writes to the Storage collaborator.

All jobs run on one worker thread in submission order, so two snapshots
can never land out of order and a slow write never delays a tick.
Failures are logged and otherwise ignored: the in-memory state has
already moved on and the next successful write carries it.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Protocol

from .errors import PersistenceError

log = logging.getLogger(__name__)


class Storage(Protocol):
    def read(self, key: str) -> str | None: ...

    def write(self, key: str, blob: str) -> bool: ...


class PersistenceWriter:
    """Single-worker write queue in front of a :class:`Storage`."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="timerdeck-writer"
        )
        self._pending: set[Future] = set()
        self._lock = threading.Lock()
        self.failures = 0

    @property
    def storage(self) -> Storage:
        return self._storage

    def submit_write(self, key: str, blob: str) -> Future:
        return self.submit(self._write, key, blob)

    def submit(self, fn: Callable, *args) -> Future:
        """Queue *fn(*args)* behind every previously submitted job."""
        future = self._executor.submit(self._run, fn, *args)
        with self._lock:
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def flush(self, timeout: float | None = None) -> bool:
        """Block until every job queued so far has finished.

        Returns ``False`` if *timeout* expired first.
        """
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    # ── internals ─────────────────────────────────────────────────────

    def _run(self, fn: Callable, *args):
        try:
            return fn(*args)
        except Exception as exc:
            self.failures += 1
            log.error("Persistence job failed: %s", exc, exc_info=exc)
            raise

    def _write(self, key: str, blob: str) -> None:
        if not self._storage.write(key, blob):
            raise PersistenceError(f"storage rejected write for key {key!r}")

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._pending.discard(future)
