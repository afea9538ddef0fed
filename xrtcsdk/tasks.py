"""A named worker thread that runs posted tasks one at a time, in order."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from typing import Any

_log = logging.getLogger(__name__)

_STOP = object()


class TaskThread:
    """Runs callables posted to it on a dedicated thread.

    Tasks posted before :meth:`start` wait until the thread starts. Tasks
    posted after :meth:`stop` are dropped. An exception raised by one task
    is logged and does not stop the thread.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._queue: queue.SimpleQueue[Any] = queue.SimpleQueue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._stopped = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stopped

    @property
    def is_current(self) -> bool:
        """True when called from this thread."""
        return self._thread is not None and threading.current_thread() is self._thread

    def start(self) -> None:
        with self._lock:
            if self._thread is not None or self._stopped:
                return
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()

    def stop(self) -> None:
        """Run the tasks already posted, then end the thread."""
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            self._queue.put(_STOP)
            thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def post_task(self, task: Callable[[], Any]) -> bool:
        """Queue a task; returns False if the thread has been stopped."""
        with self._lock:
            if self._stopped:
                return False
            self._queue.put(task)
            return True

    def _run(self) -> None:
        while True:
            task = self._queue.get()
            if task is _STOP:
                return
            try:
                task()
            except Exception:
                _log.exception("task failed on %s", self._name)

    def __enter__(self) -> TaskThread:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __repr__(self) -> str:
        return f"TaskThread({self._name!r})"